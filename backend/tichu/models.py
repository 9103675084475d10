from tichu import db
import time


class Snapshot(db.Model):
    """A single key/value slot holding one serialized game."""
    __tablename__ = 'snapshot'
    key = db.Column(db.String(64), primary_key=True)
    payload = db.Column(db.Text, nullable=False)  # JSON-encoded game
    updated_at = db.Column(db.Float, nullable=False, default=time.time)

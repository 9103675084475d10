import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///tichu.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Key of the single slot holding the serialized game
    STORAGE_KEY = os.environ.get('STORAGE_KEY', 'tichu:state')
    # Accepted takenPoints on submitted rounds (card points range from -25 to 125)
    TAKEN_POINTS_MIN = int(os.environ.get('TAKEN_POINTS_MIN', '-25'))
    TAKEN_POINTS_MAX = int(os.environ.get('TAKEN_POINTS_MAX', '125'))
    TAKEN_POINTS_STEP = int(os.environ.get('TAKEN_POINTS_STEP', '5'))
    # Optional: expose POST /api/games/crash to exercise client error display
    CRASH_ENDPOINT_ENABLED = os.environ.get('CRASH_ENDPOINT_ENABLED', '0').lower() in ('1', 'true', 'yes')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173',
        ).split(',') if o.strip()
    ]

def _events(received, name):
    return [pkt['args'][0] for pkt in received if pkt['name'] == name]


def test_socket_connect_and_join(sio_client):
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    sio_client.emit('join_tracker', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'joined' for pkt in received)
    # Current scores are pushed on join
    states = _events(received, 'state_update')
    assert states[-1] == {'ourScore': 0, 'theirScore': 0, 'history': []}


def test_ping_echoes(sio_client):
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    assert _events(sio_client.get_received('/ws'), 'pong') == [{'n': 1}]


def test_scoring_pushes_state_update(sio_client, client):
    sio_client.emit('join_tracker', {}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    res = client.post('/api/games/turns', json={'takenPoints': 75, 'consecutive': 'none'})
    assert res.status_code == 201

    states = _events(sio_client.get_received('/ws'), 'state_update')
    assert states
    assert states[-1]['ourScore'] == 75
    assert states[-1]['theirScore'] == 25


def test_left_room_gets_no_updates(sio_client, client):
    sio_client.emit('join_tracker', {}, namespace='/ws')
    sio_client.emit('leave_tracker', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'left' for pkt in received)

    client.post('/api/games/turns', json={'takenPoints': 60})
    assert _events(sio_client.get_received('/ws'), 'state_update') == []

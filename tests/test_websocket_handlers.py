"""
Tests for the WebSocket events using Flask-SocketIO's test client.
"""

import unittest
from unittest import mock
from wordle_clone import create_app
from wordle_clone.config import TestingConfig
from wordle_clone.services.game_service import get_game_service


def events_named(received, name):
    return [event['args'][0] for event in received if event['name'] == name]


class TestWebSocketHandlers(unittest.TestCase):
    """Test cases for key events over a socket connection."""

    def setUp(self):
        self.app, self.socketio = create_app(TestingConfig)
        self.game_id = get_game_service().create_new_game(secret='REACT')
        self.client = self.socketio.test_client(self.app)
        self.client.get_received()

    def tearDown(self):
        self.client.disconnect()

    def test_join_game_sends_state(self):
        self.client.emit('join_game', {'game_id': self.game_id})
        updates = events_named(self.client.get_received(), 'game_state_update')
        self.assertEqual(len(updates), 1)
        self.assertEqual(updates[0]['state']['status'], 'ongoing')

    def test_key_press_updates_state(self):
        for key in ['c', 'R', 'A', 'N', 'E', 'Enter']:
            self.client.emit('key_press', {'game_id': self.game_id, 'key': key})

        updates = events_named(self.client.get_received(), 'game_state_update')
        self.assertEqual(len(updates), 6)
        self.assertEqual(updates[4]['state']['current_attempt'], 'CRANE')
        self.assertEqual(updates[-1]['state']['guesses'][0], 'CRANE')

    def test_submit_guess_wins(self):
        self.client.emit('submit_guess', {'game_id': self.game_id, 'guess': 'REACT'})
        updates = events_named(self.client.get_received(), 'game_state_update')
        self.assertEqual(updates[-1]['state']['status'], 'won')

    def test_invalid_guess_notification(self):
        self.client.emit('submit_guess', {'game_id': self.game_id, 'guess': 'XXXXX'})
        received = self.client.get_received()

        notices = events_named(received, 'invalid_guess')
        self.assertEqual(len(notices), 1)
        self.assertEqual(notices[0]['guess'], 'XXXXX')
        self.assertEqual(events_named(received, 'game_state_update'), [])
        self.assertEqual(get_game_service().get_game_state(self.game_id).guesses, [''] * 6)

    def test_unknown_game(self):
        self.client.emit('key_press', {'game_id': 'missing', 'key': 'A'})
        errors = events_named(self.client.get_received(), 'error')
        self.assertEqual(errors[0]['error'], 'Game not found')

    def test_overlong_guess_is_ignored(self):
        self.client.emit('submit_guess', {'game_id': self.game_id, 'guess': 'CRANES'})
        updates = events_named(self.client.get_received(), 'game_state_update')
        self.assertEqual(updates[-1]['state']['guesses'], [''] * 6)

    def test_game_removed_mid_event(self):
        service = get_game_service()
        engine = service.get_engine(self.game_id)

        with mock.patch.object(service, 'get_engine', side_effect=[engine, None, None]):
            self.client.emit('key_press', {'game_id': self.game_id, 'key': 'A'})

        errors = events_named(self.client.get_received(), 'error')
        self.assertEqual(errors[0]['error'], 'Game not found')

    def test_missing_game_id(self):
        self.client.emit('key_press', {'key': 'A'})
        errors = events_named(self.client.get_received(), 'error')
        self.assertEqual(errors[0]['error'], 'Game ID is required')

    def test_missing_guess(self):
        self.client.emit('submit_guess', {'game_id': self.game_id})
        errors = events_named(self.client.get_received(), 'error')
        self.assertEqual(errors[0]['error'], 'Guess is required')


if __name__ == '__main__':
    unittest.main()

"""
Tests for the HTTP endpoints using Flask's test client.
"""

import unittest
from unittest import mock
from wordle_clone import create_app
from wordle_clone.config import TestingConfig
from wordle_clone.services.game_engine import INVALID_GUESS_MESSAGE
from wordle_clone.services.game_service import get_game_service


class TestGameController(unittest.TestCase):
    """Test cases for the game blueprint."""

    def setUp(self):
        self.app, self.socketio = create_app(TestingConfig)
        self.client = self.app.test_client()

        response = self.client.post('/api/new_game')
        self.assertEqual(response.status_code, 200)
        self.new_game_data = response.get_json()
        self.game_id = self.new_game_data['game_id']

        # Pin the secret so outcomes are deterministic
        get_game_service().restart_game(self.game_id, secret='REACT')

    def press(self, key):
        return self.client.post(f'/api/game/{self.game_id}/key', json={'key': key})

    def guess(self, word):
        return self.client.post(f'/api/game/{self.game_id}/guess', json={'guess': word})

    def test_new_game(self):
        data = self.new_game_data
        self.assertTrue(data['success'])
        self.assertEqual(data['state']['status'], 'ongoing')
        self.assertIsNone(data['state']['answer'])
        self.assertEqual(data['state']['word_length'], 5)
        self.assertEqual(data['state']['max_guesses'], 6)
        self.assertEqual(data['keyboard'][2][0], 'ENTER')

    def test_get_state(self):
        response = self.client.get(f'/api/game/{self.game_id}/state')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['state']['game_id'], self.game_id)

    def test_unknown_game_is_404(self):
        self.assertEqual(self.client.get('/api/game/missing/state').status_code, 404)
        self.assertEqual(
            self.client.post('/api/game/missing/key', json={'key': 'A'}).status_code, 404
        )
        self.assertEqual(
            self.client.post('/api/game/missing/guess', json={'guess': 'REACT'}).status_code, 404
        )
        self.assertEqual(self.client.post('/api/game/missing/restart').status_code, 404)

    def test_key_presses(self):
        for key in 'crane':
            self.press(key)
        response = self.press('Enter')

        self.assertEqual(response.status_code, 200)
        state = response.get_json()['state']
        self.assertEqual(state['guesses'][0], 'CRANE')
        self.assertEqual(state['guess_results'][0], [
            ['C', 'present'], ['R', 'present'], ['A', 'correct'], ['N', 'absent'], ['E', 'present']
        ])
        self.assertEqual(state['letter_status']['A'], 'correct')
        self.assertEqual(state['active_row'], 1)

    def test_backspace(self):
        self.press('C')
        self.press('R')
        response = self.press('BACKSPACE')
        self.assertEqual(response.get_json()['state']['current_attempt'], 'C')

    def test_missing_key_is_400(self):
        response = self.client.post(f'/api/game/{self.game_id}/key', json={})
        self.assertEqual(response.status_code, 400)

    def test_guess_that_is_not_a_full_word_changes_nothing(self):
        self.press('T')
        self.press('R')
        before = self.client.get(f'/api/game/{self.game_id}/state').get_json()['state']

        for word in ['CRANES', 'C-RANE', 'CR']:
            response = self.guess(word)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.get_json()['state'], before, word)

        self.assertEqual(before['current_attempt'], 'TR')
        self.assertEqual(before['guesses'], [''] * 6)

    def test_game_removed_mid_request_is_404(self):
        service = get_game_service()
        engine = service.get_engine(self.game_id)

        with mock.patch.object(service, 'get_engine', side_effect=[engine, None, None]):
            response = self.press('A')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()['error'], 'Game not found')

        with mock.patch.object(service, 'get_engine', side_effect=[engine, None, None]):
            response = self.guess('CRANE')
        self.assertEqual(response.status_code, 404)

    def test_missing_guess_is_400(self):
        response = self.client.post(f'/api/game/{self.game_id}/guess', json={'word': 'REACT'})
        self.assertEqual(response.status_code, 400)

    def test_winning_guess(self):
        response = self.guess('REACT')
        self.assertEqual(response.status_code, 200)
        state = response.get_json()['state']
        self.assertEqual(state['status'], 'won')
        self.assertTrue(state['won'])
        self.assertEqual(state['answer'], 'REACT')

    def test_invalid_guess_returns_notification(self):
        response = self.guess('XXXXX')
        self.assertEqual(response.status_code, 422)

        data = response.get_json()
        self.assertFalse(data['success'])
        self.assertEqual(data['notification'], {
            'type': 'invalid_guess',
            'message': INVALID_GUESS_MESSAGE
        })
        self.assertEqual(data['state']['current_attempt'], 'XXXXX')
        self.assertEqual(data['state']['guesses'], [''] * 6)
        self.assertNotIn('notification', data['state'])

    def test_invalid_guess_via_enter_key(self):
        for key in 'XXXXX':
            self.press(key)
        response = self.press('ENTER')
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.get_json()['notification']['type'], 'invalid_guess')

    def test_losing_game(self):
        for word in ['CRANE', 'TRACE', 'CRATE', 'CATER', 'TREAT']:
            state = self.guess(word).get_json()['state']
            self.assertEqual(state['status'], 'ongoing')

        state = self.guess('REACH').get_json()['state']
        self.assertEqual(state['status'], 'lost')
        self.assertEqual(state['answer'], 'REACT')

        # Further input is ignored
        state = self.press('A').get_json()['state']
        self.assertEqual(state['current_attempt'], '')

    def test_restart(self):
        self.guess('REACT')
        response = self.client.post(f'/api/game/{self.game_id}/restart')
        self.assertEqual(response.status_code, 200)
        state = response.get_json()['state']
        self.assertEqual(state['status'], 'ongoing')
        self.assertEqual(state['guesses'], [''] * 6)
        self.assertIsNone(state['answer'])

    def test_delete_game(self):
        response = self.client.delete(f'/api/game/{self.game_id}')
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.get_json()['success'])

        response = self.client.delete(f'/api/game/{self.game_id}')
        self.assertEqual(response.status_code, 404)

    def test_health(self):
        response = self.client.get('/api/health')
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data['status'], 'healthy')
        self.assertEqual(data['active_games'], 1)


if __name__ == '__main__':
    unittest.main()

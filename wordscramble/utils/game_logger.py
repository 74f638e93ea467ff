"""
Game Logger Module for Word Scramble Server

Writes one JSON document per line for every player action, server reply,
game event and error, to a file per day under the configured log directory.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity


class GameLogger:
    """
    JSON-lines logger shared by the HTTP and WebSocket layers.

    Entries carry an event type (USER_ACTION, SERVER_RESPONSE_SUCCESS,
    SERVER_RESPONSE_ERROR, GAME_EVENT or ERROR), the action name, who sent
    it and a details dict. Only warnings and errors reach the console.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    @classmethod
    def from_config(cls, config_class=Config) -> 'GameLogger':
        return cls(config_class.LOG_DIR, config_class.LOG_LEVEL)

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordscramble')
        logger.setLevel(self.level)

        # Re-creating the logger (e.g. in tests) must not stack handlers
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        to_file = logging.FileHandler(self.log_file, encoding='utf-8')
        to_file.setLevel(self.level)
        to_file.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        to_console = logging.StreamHandler()
        to_console.setLevel(logging.WARNING)
        to_console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(to_file)
        logger.addHandler(to_console)
        return logger

    def _entry(self, event_type: str, action: str, user_info: Dict[str, Any], details: Dict[str, Any]) -> str:
        return json.dumps({
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """Record a player request before it is handled."""
        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }
        self.logger.info(self._entry('USER_ACTION', action, get_user_identity(request), details))

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Record what was sent back for `action`.

        Failed responses are logged at ERROR level. Game state in the
        payload is reduced to a summary.
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._summarize(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        entry = self._entry(event_type, action, get_user_identity(request), details)
        if success:
            self.logger.info(entry)
        else:
            self.logger.error(entry)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str, **kwargs):
        """Record a game event such as 'word_accepted', 'word_rejected' or 'game_restarted'."""
        user_info = {'user_ip': user_ip or 'unknown', 'session_id': None}
        self.logger.info(self._entry('GAME_EVENT', event, user_info, {'game_id': game_id, **kwargs}))

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._entry('ERROR', action, get_user_identity(request), details))

    def _summarize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = data.copy()

        state = summary.get('state')
        if isinstance(state, dict):
            summary['state'] = {
                'root_word': state.get('root_word'),
                'score': state.get('score'),
                'used_words_count': len(state.get('used_words', [])),
                'error_visible': (state.get('error') or {}).get('visible')
            }

        pool = summary.get('word_pool')
        if isinstance(pool, dict):
            summary['word_pool'] = {'total_words': pool.get('total_words')}

        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Counts today's entries per event type, for the health endpoint."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counters = {
            'USER_ACTION': 'user_actions',
            'SERVER_RESPONSE': 'server_responses',
            'GAME_EVENT': 'game_events',
            'ERROR': 'errors'
        }
        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            **{name: 0 for name in counters.values()}
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    # First match wins: SERVER_RESPONSE_ERROR is a response, not an error
                    for marker, name in counters.items():
                        if marker in line:
                            stats[name] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger.from_config()

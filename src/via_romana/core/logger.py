import logging
import os
from datetime import datetime

from via_romana.config import LOG_DIR


class GameLogger:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(GameLogger, cls).__new__(cls)
            cls._instance._setup()
        return cls._instance

    def _setup(self):
        if not os.path.exists(LOG_DIR):
            os.makedirs(LOG_DIR)

        self.game_logger = logging.getLogger('via_romana')
        self.game_logger.setLevel(logging.INFO)
        if not self.game_logger.handlers:
            fh = logging.FileHandler(
                os.path.join(LOG_DIR, f'game_{datetime.now().strftime("%Y%m%d")}.log'))
            fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
            self.game_logger.addHandler(fh)

    def log_event(self, category: str, message: str):
        print(f"[{category}] {message}")
        self.game_logger.info(f"[{category}] {message}")

    def log_warning(self, category: str, message: str):
        print(f"[{category}] WARNING: {message}")
        self.game_logger.warning(f"[{category}] {message}")

    def log_error(self, category: str, message: str):
        print(f"[{category}] ERROR: {message}")
        self.game_logger.error(f"[{category}] {message}")

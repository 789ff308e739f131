import logging
import os
from logging.handlers import RotatingFileHandler
from wastewise.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 1024 * 1024 * 10
LOG_BACKUPS = 5

class LoggerConfig:
    """
    Application logger writing to a rotating file and the console.
    Call sites pass diagnostic context as a dict, which is appended to the message.
    """
    def __init__(self, level=20, logger_name="WasteWise", log_directory="logs", log_file="app.log"):
        self.level = level
        self.log_directory = os.path.abspath(log_directory)
        self.log_file_path = os.path.join(self.log_directory, log_file)
        self.logger = logging.getLogger(logger_name)
        self.setup_logger()

    def setup_logger(self):
        # Own handlers only: ancestors (root) may carry unrelated handlers
        if not self.logger.handlers:
            os.makedirs(self.log_directory, exist_ok=True)
            formatter = logging.Formatter(LOG_FORMAT)

            file_handler = RotatingFileHandler(
                self.log_file_path, backupCount=LOG_BACKUPS, maxBytes=MAX_LOG_BYTES, encoding="utf-8"
            )
            console_handler = logging.StreamHandler()

            for handler in (file_handler, console_handler):
                handler.setLevel(self.level)
                handler.setFormatter(formatter)
                self.logger.addHandler(handler)

        self.logger.setLevel(self.level)

    def log(self, level: int, message: str, extra: dict = None, exc_info: bool = False):
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, message, exc_info=exc_info)

# Initialize Logger
logs = LoggerConfig(
    level=settings.LOGGER,
    logger_name="WASTEWISE-BE",
    log_directory=settings.LOG_DIRECTORY,
    log_file="app.log"
)

import json
import logging
import sys
import traceback
from datetime import datetime
from decimal import Decimal
from logging.handlers import RotatingFileHandler
from pathlib import Path


class CustomJSONEncoder(json.JSONEncoder):
	def default(self, o):
		if isinstance(o, datetime):
			return o.isoformat()
		if isinstance(o, Decimal):
			return str(o)
		return super().default(o)


class JSONFormatter(logging.Formatter):
	"""
	Formatter that outputs one structured JSON object per record.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.fromtimestamp(record.created).isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info and record.exc_info[0] is not None:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		if hasattr(record, 'extra_data'):
			log_entry['data'] = record.extra_data

		return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


class AppLogger:
	"""
	Centralized logging configuration: console output plus rotating JSON files
	under ``<log_directory>/system`` and ``<log_directory>/errors``.
	"""

	CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'

	def __init__(
		self,
		log_directory: str = 'logs',
		console_level: str = 'INFO',
		file_level: str = 'DEBUG',
		max_file_size: int = 10 * 1024 * 1024,
		backup_count: int = 5,
	):
		self.log_directory = Path(log_directory)
		self.console_level = getattr(logging, console_level.upper())
		self.file_level = getattr(logging, file_level.upper())
		self.max_file_size = max_file_size
		self.backup_count = backup_count

		self.log_directory.mkdir(parents=True, exist_ok=True)
		self._setup_logging()

	def _setup_logging(self) -> None:
		root_logger = logging.getLogger()
		root_logger.handlers.clear()
		root_logger.setLevel(logging.DEBUG)

		logging.getLogger('httpx').setLevel(logging.WARNING)
		logging.getLogger('httpcore').setLevel(logging.WARNING)
		logging.getLogger('aiosqlite').setLevel(logging.WARNING)

		self._setup_console_handler(root_logger)
		self._setup_file_handler(root_logger, 'system', 'app.log', self.file_level)
		self._setup_file_handler(root_logger, 'errors', 'errors.log', logging.WARNING)

	def _setup_console_handler(self, logger: logging.Logger) -> None:
		console_handler = logging.StreamHandler(sys.stdout)
		console_handler.setLevel(self.console_level)
		console_handler.setFormatter(logging.Formatter(self.CONSOLE_FORMAT, datefmt='%H:%M:%S'))
		logger.addHandler(console_handler)

	def _setup_file_handler(
		self, logger: logging.Logger, subdirectory: str, filename: str, level: int
	) -> None:
		log_dir = self.log_directory / subdirectory
		log_dir.mkdir(exist_ok=True)

		file_handler = RotatingFileHandler(
			log_dir / filename,
			maxBytes=self.max_file_size,
			backupCount=self.backup_count,
			encoding='utf-8',
		)
		file_handler.setLevel(level)
		file_handler.setFormatter(JSONFormatter())
		logger.addHandler(file_handler)


app_logger: AppLogger | None = None


def setup_logging(log_directory: str = 'logs', console_level: str = 'INFO') -> AppLogger:
	global app_logger
	if app_logger is None:
		app_logger = AppLogger(log_directory=log_directory, console_level=console_level)
	return app_logger

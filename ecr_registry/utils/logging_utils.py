"""
Logging setup for the ECR registry module.

Log records are emitted as JSON. The level is taken from the LOG_LEVEL
environment variable.
"""

import logging
import os

from pythonjsonlogger import jsonlogger

log_level_map = {
	'DEBUG': logging.DEBUG,
	'INFO': logging.INFO,
	'WARNING': logging.WARNING,
	'ERROR': logging.ERROR,
	'CRITICAL': logging.CRITICAL,
}


def configure_logging(log_level_str: str = None) -> logging.Logger:
	"""
	Configure the root logger with a JSON formatter.

	Args:
	    log_level_str: Level name, defaults to LOG_LEVEL or INFO

	Returns:
	    logging.Logger: The root logger
	"""
	log_level_str = log_level_str or os.environ.get('LOG_LEVEL', 'INFO')
	log_level = log_level_map.get(log_level_str.upper(), logging.INFO)

	logger = logging.getLogger()
	logger.setLevel(log_level)

	logHandler = logging.StreamHandler()
	formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
	logHandler.setFormatter(formatter)
	logger.addHandler(logHandler)

	return logger

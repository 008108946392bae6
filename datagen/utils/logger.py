import logging
import os
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union


_level_override: Optional[int] = None
_configured_loggers = []


def _resolve(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    name = level.upper()
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def default_level() -> int:
    if _level_override is not None:
        return _level_override
    return _resolve(os.getenv("DATAGEN_LOG_LEVEL", "INFO"))


def set_log_level(level: Union[int, str]) -> None:
    """Set the level for loggers created by setup_logger, existing and future."""
    global _level_override
    _level_override = _resolve(level)
    for logger in _configured_loggers:
        logger.setLevel(_level_override)
        for handler in logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(_level_override)


def setup_logger(
    name: str,
    level: Optional[Union[int, str]] = None,
    log_to_file: Optional[bool] = None,
    log_dir: Optional[str] = None
) -> logging.Logger:
    logger = logging.getLogger(name)
    
    if logger.handlers:
        return logger
    
    level = default_level() if level is None else _resolve(level)
    if log_to_file is None:
        log_to_file = bool(os.getenv("DATAGEN_LOG_DIR"))
    log_dir = log_dir or os.getenv("DATAGEN_LOG_DIR", "logs")
    
    logger.setLevel(level)
    
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)
    
    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        
        log_file = log_path / f"{name}_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
    
    _configured_loggers.append(logger)
    return logger

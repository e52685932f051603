import logging
import re

_CAMEL_CASE_PATTERN1 = re.compile(r'(.)([A-Z][a-z]+)')
_CAMEL_CASE_PATTERN2 = re.compile(r'([a-z0-9])([A-Z])')


def logger_setup(logger_name="Camara Client", log_level=logging.INFO, propagate=False):
    """
    Set up and return a logger with the specified name and level.
    Avoids affecting the root logger by setting propagate to False.

    Args:
        logger_name (str): The name of the logger.
        log_level (int): The logging level (e.g., logging.INFO, logging.DEBUG).

    Returns:
        logger (logging.Logger): Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Avoid adding duplicate handlers if already set up
    if not logger.hasHandlers():
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s - raised_by: %(name)s',
            datefmt='%Y-%m-%d %H:%M:%S'
            )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.setLevel(log_level)
    logger.propagate = propagate

    return logger


def camel_to_snake(name: str) -> str:
    """`dataHoraInicio` -> `data_hora_inicio`; trailing underscores (`proposicao_`) are dropped."""
    name = _CAMEL_CASE_PATTERN1.sub(r'\1_\2', name)
    name = _CAMEL_CASE_PATTERN2.sub(r'\1_\2', name)
    return name.lower().rstrip('_')

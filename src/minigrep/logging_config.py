import logging
import logging.config


def setup_logging(log_level="WARNING"):
    """
    Route minigrep's log records to stderr, so they never mix with matches on stdout.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(name)s: %(levelname)s: %(message)s'
            },
            'detailed': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
        },
        'handlers': {
            'stderr': {
                'class': 'logging.StreamHandler',
                'level': log_level,
                'formatter': 'detailed' if log_level == 'DEBUG' else 'simple',
                'stream': 'ext://sys.stderr'
            },
        },
        'loggers': {
            'minigrep': {
                'level': log_level,
                'handlers': ['stderr'],
                'propagate': False
            },
        },
    })


def get_logger(name):
    """Logger under the minigrep namespace, e.g. get_logger('scanner')."""
    return logging.getLogger(f"minigrep.{name}")

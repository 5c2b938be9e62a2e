# logger_setup.py

import logging
import os
import json

def setup_logging(config_path='config.json', log_root='runs'):
    """
    Points the "bokeh" logger at the console and at runs/<run_id>/bokeh.log.

    Only the application logger is configured and it does not propagate, so
    pygame start-up chatter and test runners keep their own handlers. Calling
    this again (a second window, a test) closes and replaces the previous
    handlers instead of stacking duplicates.

    Data Contract:
    - Inputs:
        - config_path (str) - JSON file with "run_id" and a "logging" section
          holding "level" and "format".
        - log_root (str) - Parent directory of the per-run folders.
    - Outputs: The "bokeh" logger, ready for use.
    - Side Effects: Creates the run folder and opens the log file.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    run_id = config['run_id']
    log_config = config['logging']

    # --- Get a dedicated logger for the application ---
    logger = logging.getLogger("bokeh")
    logger.setLevel(log_config['level'])
    logger.propagate = False

    # --- Create directories for logs ---
    log_dir = os.path.join(log_root, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'bokeh.log')

    formatter = logging.Formatter(log_config['format'])

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger

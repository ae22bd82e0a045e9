import logging
import os
from typing import Any

separator = "".center(60, "-")

def log_test_name(test_name : str) -> None:
    logging.info(separator)
    logging.info(test_name)
    logging.info(separator)

def log_input_expected_result(input : Any, expected : Any, result : Any) -> None:
    logging.info(f"{str(input)}:  expected: {str(expected)} result: {str(result)}")

def log_input_expected_error(input : Any, expected_error : type[BaseException], error : BaseException) -> None:
    logging.info(f"{str(input)}:  expected: {expected_error.__name__} result: {type(error).__name__}: {str(error)}")

def create_logfile(results_path : str, log_name : str, log_level : int = logging.DEBUG) -> logging.FileHandler:
    """
    Send log output for a test run to a file in the results directory
    """
    os.makedirs(results_path, exist_ok=True)
    log_path = os.path.join(results_path, log_name)
    file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logging.getLogger('').addHandler(file_handler)
    return file_handler

def end_logfile(file_handler : logging.FileHandler) -> None:
    logging.getLogger('').removeHandler(file_handler)
    file_handler.close()

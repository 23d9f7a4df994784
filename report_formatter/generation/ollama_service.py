"""Helpers for checking and starting the local Ollama service."""

import logging
import shutil
import subprocess
import time

import requests

from ..config import DEFAULT_OLLAMA_HOST

logger = logging.getLogger(__name__)


def is_ollama_installed() -> bool:
    """Check if Ollama is installed on the system."""
    return shutil.which("ollama") is not None


def is_ollama_running(host: str = DEFAULT_OLLAMA_HOST) -> bool:
    """Check if the Ollama server answers on its tags endpoint."""
    try:
        response = requests.get(f"{host.rstrip('/')}/api/tags", timeout=5)
    except requests.RequestException as e:
        logger.debug(f"Ollama not reachable at {host}: {str(e)}")
        return False
    return response.status_code == 200


def start_ollama(wait: float = 2.0) -> bool:
    """Start the Ollama service in the background."""
    try:
        subprocess.Popen(["ollama", "serve"],
                         stdout=subprocess.DEVNULL,
                         stderr=subprocess.DEVNULL)
    except OSError as e:
        logger.error(f"Error starting Ollama: {str(e)}")
        return False
    time.sleep(wait)
    return True


def check_ollama(host: str = DEFAULT_OLLAMA_HOST) -> bool:
    """Check that Ollama is running, starting it locally if needed."""
    if is_ollama_running(host):
        return True

    if not is_ollama_installed():
        logger.warning("Ollama is not installed. Visit https://ollama.com/")
        return False

    logger.info("Ollama is not running. Attempting to start it...")
    if start_ollama() and is_ollama_running(host):
        logger.info("Ollama started.")
        return True

    logger.warning("Failed to start Ollama.")
    return False

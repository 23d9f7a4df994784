"""Generation package for producing raw report text with Ollama."""

from .generator import GeneratedReport, ReportGenerator
from .ollama_service import check_ollama, is_ollama_installed, is_ollama_running, start_ollama
from .prompts import build_report_prompt, fallback_report

__all__ = [
    'GeneratedReport',
    'ReportGenerator',
    'check_ollama',
    'is_ollama_installed',
    'is_ollama_running',
    'start_ollama',
    'build_report_prompt',
    'fallback_report',
]

# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Garante que os modulos da raiz (quiz, app_state, server) sejam importaveis
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def setup_test_env():
    """Configura variaveis de ambiente para testes."""
    env_vars = {
        "COMPLETION_API_KEY": "test-key-123",
        "COMPLETION_API_URL": "https://completion.test/v1/chat/completions",
        "COMPLETION_BACKOFF_SECONDS": "0",
        "LOG_LEVEL": "ERROR",
    }
    with patch.dict(os.environ, env_vars):
        yield

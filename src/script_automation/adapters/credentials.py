"""ICredentialSource adapters."""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from script_automation.ports.interfaces import ICredentialSource


class EnvCredentialSource(ICredentialSource):
    """Reads keys from the process environment (after loading .env)."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, load_env_file: bool = True):
        if environ is None and load_env_file:
            load_dotenv()
        self._environ = environ

    def get(self, name: str) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ
        value = environ.get(name)
        return value.strip() if value and value.strip() else None

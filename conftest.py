"""Root conftest: puts the project root on sys.path for pytest.

Also clears any real Clockify key from the environment so no test can reach
the live API. Tests fake Clockify with httpx.MockTransport.
"""
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

os.environ.pop("CLOCKIFY_API_KEY", None)

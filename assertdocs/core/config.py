from pathlib import Path
from dotenv import dotenv_values

def load_env(root: Path = None) -> dict:
    env_file = (root or Path.cwd()) / ".env"
    return dotenv_values(env_file) if env_file.exists() else {}

def get(key: str, default=None, root: Path = None):
    value = load_env(root).get(key)
    return default if value in (None, "") else value

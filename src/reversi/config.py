import os
from dotenv import load_dotenv

load_dotenv()


class ServerConfig:
    def __init__(self) -> None:
        self.host = os.getenv("REVERSI_SERVER_HOST", "127.0.0.1")
        self.port = int(os.getenv("REVERSI_SERVER_PORT", "8000"))
        self.rate_limit_requests = int(os.getenv("REVERSI_RATE_LIMIT_REQUESTS", "60"))
        self.rate_limit_window = float(os.getenv("REVERSI_RATE_LIMIT_WINDOW", "60"))


def get_log_level() -> str:
    return os.getenv("REVERSI_LOG_LEVEL", "INFO").upper()

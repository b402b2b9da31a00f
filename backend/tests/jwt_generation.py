import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add parent directory to path so we can import src
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import jwt
from src.config.settings import Config


def generate_jwt_token(user_id: str = "u1", expires_in: timedelta = timedelta(hours=1)) -> str:
    """Generate a valid JWT token for testing API endpoints"""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "sid": "test-session-id",
        "exp": now + expires_in,
        "iat": now,
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }

    token = jwt.encode(payload, Config.SERVICE_AUTH_SECRET, algorithm="HS256")
    return token


if __name__ == "__main__":
    user_id = sys.argv[1] if len(sys.argv) > 1 else "u1"
    print(f"Bearer {generate_jwt_token(user_id)}")

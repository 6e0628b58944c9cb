from datetime import timedelta

import bcrypt
import jwt

from restaurant_pos.config import Settings
from restaurant_pos.core.errors import AuthenticationError
from restaurant_pos.core.utils import utcnow

ALGORITHM = "HS256"


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # в базе лежит что-то, что не является bcrypt-хэшем
        return False


def generate_all_tokens(
    settings: Settings, email: str, first_name: str, last_name: str, uid: str
) -> tuple[str, str]:
    """
    Выпускает пару (access, refresh).
    Access-токен несёт данные пользователя, refresh — только uid.
    """
    now = utcnow()
    claims = {
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "uid": uid,
        "iat": now,
        "exp": now + timedelta(hours=settings.ACCESS_TOKEN_TTL_HOURS),
    }
    refresh_claims = {
        "uid": uid,
        "iat": now,
        "exp": now + timedelta(hours=settings.REFRESH_TOKEN_TTL_HOURS),
    }
    token = jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)
    refresh_token = jwt.encode(refresh_claims, settings.SECRET_KEY, algorithm=ALGORITHM)
    return token, refresh_token


def decode_token(settings: Settings, token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("token is expired")
    except jwt.PyJWTError:
        raise AuthenticationError("token is invalid")

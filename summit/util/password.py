"""Password hashing utilities.

bcrypt is CPU bound, so the async helpers run it in the default executor to
keep the event loop responsive.
"""

import asyncio

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


async def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, pwd_context.hash, password)


async def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, pwd_context.verify, password, password_hash
    )

# tests/utils.py


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}

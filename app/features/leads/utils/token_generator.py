import uuid


def generate_download_token() -> str:
    return str(uuid.uuid4())

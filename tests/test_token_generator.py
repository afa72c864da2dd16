import uuid

from app.features.leads.utils.token_generator import generate_download_token


def test_token_is_canonical_uuid_string():
    token = generate_download_token()
    assert len(token) == 36
    assert str(uuid.UUID(token)) == token
    assert uuid.UUID(token).version == 4


def test_tokens_do_not_repeat():
    tokens = {generate_download_token() for _ in range(1000)}
    assert len(tokens) == 1000

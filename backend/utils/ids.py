import uuid


def generate_id() -> str:
    """New opaque 128-bit identifier in its canonical 36-character form."""
    return str(uuid.uuid4())

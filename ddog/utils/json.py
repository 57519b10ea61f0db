import json
from typing import Optional, Union


def is_body_valid_json(body: Union[str, bytes]) -> Optional[ValueError]:
    """Return the parse error for an invalid JSON body, or None when it is valid.

    Undecodable bytes surface as the `UnicodeDecodeError` raised while decoding.
    """
    try:
        json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return e
    return None

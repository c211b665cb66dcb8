from typing import Optional

import attrs


@attrs.define
class PerformerEntity:
    event_id: int
    name: str
    image_url: str
    time: str
    is_headliner: bool = False
    id: Optional[int] = None

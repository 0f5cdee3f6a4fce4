from typing import Any, Dict

from certgen.services.commands.base import PayloadCommand, PayloadState


class WatermarkCommand(PayloadCommand):

    def __init__(self, watermark: str):
        self.watermark = watermark

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        return {"Watermark": self.watermark}

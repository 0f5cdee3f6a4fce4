import asyncio
import copy
import logging
from typing import Any, Dict, List, Optional

from certgen.models import CertificateData
from certgen.services.commands import PayloadCommand, PayloadState

logger = logging.getLogger(__name__)


def merge_payload(target: Dict[str, Any], source: Dict[str, Any], path: str = "") -> Dict[str, Any]:
    """
    Recursively merge ``source`` into ``target``.

    Nested dicts are merged key by key; any other value in ``source``
    replaces the one in ``target``.
    """
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merge_payload(current, value, f"{path}{key}.")
            continue
        if key in target and current != value:
            logger.debug(f"Payload key {path}{key} overwritten")
        target[key] = copy.deepcopy(value) if isinstance(value, dict) else value
    return target


class CertificatePayloadGenerator:
    """
    Runs every payload command for a test result and merges the fragments.

    Commands run concurrently. Their results are merged in registration
    order, so a later command wins when two write the same key.
    """

    def __init__(self, commands: List[PayloadCommand]):
        self.commands = commands
        self.state: Optional[PayloadState] = None

    def initialise(self, certificate_type: CertificateData, is_welsh: bool = False):
        self.state = PayloadState(test_result={}, certificate_type=certificate_type, is_welsh=is_welsh)

    async def generate(self, test_result: Dict[str, Any]) -> Dict[str, Any]:
        if self.state is None:
            raise RuntimeError("Payload generator used before initialise()")
        state = PayloadState(
            test_result=test_result,
            certificate_type=self.state.certificate_type,
            is_welsh=self.state.is_welsh,
        )
        return await self.run(state)

    async def generate_certificate_data(self, test_result: Dict[str, Any],
                                        certificate_type: CertificateData,
                                        is_welsh: bool = False) -> Dict[str, Any]:
        self.initialise(certificate_type, is_welsh)
        return await self.generate(test_result)

    async def run(self, state: PayloadState) -> Dict[str, Any]:
        logger.info(
            f"Generating {state.certificate_type.value} payload for "
            f"{state.test_result.get('testResultId')} (welsh={state.is_welsh})"
        )
        fragments = await asyncio.gather(*(command.generate(state) for command in self.commands))

        payload: Dict[str, Any] = {}
        for fragment in fragments:
            merge_payload(payload, fragment)
        return payload

import logging
from typing import Any, Dict

from certgen.clients.ports import DefectDictionaryLookup
from certgen.services.commands.base import PASS_OR_FAIL, PayloadCommand, PayloadState
from certgen.services.defect_classifier import generate_defects
from certgen.services.defect_formatter import flatten_defects

logger = logging.getLogger(__name__)


class DefectsCommand(PayloadCommand):
    applies_to = PASS_OR_FAIL

    def __init__(self, defect_dictionary: DefectDictionaryLookup):
        self.defect_dictionary = defect_dictionary

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        flat_defects = []
        if state.is_welsh:
            tree = await self.defect_dictionary.get_welsh_defect_dictionary()
            flat_defects = flatten_defects(tree)
            if not flat_defects:
                logger.warning("No Welsh defect translations, Welsh defects will be empty")

        result = {}
        for section in state.sections:
            defects = generate_defects(state.test_result, section, state.is_welsh, flat_defects)
            if defects:
                result[section] = defects
        return result

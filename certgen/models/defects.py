from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from certgen.models.enums import DefectBucketName


@dataclass
class FlatDefect:
    """One deficiency row of the defect dictionary, with its parents inlined."""
    im_number: Optional[int]
    im_description: Optional[str]
    im_description_welsh: Optional[str]
    item_number: Optional[int]
    item_description: Optional[str]
    item_description_welsh: Optional[str]
    ref: Optional[str]
    deficiency_text: Optional[str]
    deficiency_text_welsh: Optional[str]
    for_vehicle_type: List[str] = field(default_factory=list)


@dataclass
class DefectBucket:
    """Classified defect strings for one payload section."""
    english: Dict[DefectBucketName, List[str]] = field(
        default_factory=lambda: {name: [] for name in DefectBucketName}
    )
    welsh: Dict[DefectBucketName, List[str]] = field(
        default_factory=lambda: {name: [] for name in DefectBucketName}
    )

    def add(self, name: DefectBucketName, text: str, welsh_text: Optional[str] = None):
        self.english[name].append(text)
        if welsh_text is not None:
            self.welsh[name].append(welsh_text)

    def to_payload(self) -> Dict[str, Any]:
        """Render as payload keys, leaving out empty buckets."""
        payload = {}
        for name in DefectBucketName:
            if self.english[name]:
                payload[f"{name.value}Defects"] = list(self.english[name])
            if self.welsh[name]:
                payload[f"{name.value}DefectsWelsh"] = list(self.welsh[name])
        return payload

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class FocusSuggestionDTO:
    type: str  # goal | repertoire | technique
    title: str
    description: str
    topic: str  # what a live session should be started on

    def to_dict(self) -> dict:
        return asdict(self)

from enum import Enum


class Outcome(Enum):
    """Result of the latest user-triggered remote action."""

    NONE = ("NONE", "")
    SUCCESS = ("SUCCESS", "Success!")
    FAILURE = ("FAILURE", "Failed!")

    @property
    def label(self) -> str:
        return self.value[1]

    @classmethod
    def from_status(cls, status_code: int) -> "Outcome":
        return cls.SUCCESS if status_code == 200 else cls.FAILURE

    @classmethod
    def combine(cls, outcomes) -> "Outcome":
        """Collapse a batch of call results: any failure wins, empty is NONE."""
        result = cls.NONE
        for outcome in outcomes:
            if outcome is cls.FAILURE:
                return cls.FAILURE
            if outcome is cls.SUCCESS:
                result = cls.SUCCESS
        return result

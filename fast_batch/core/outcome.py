from enum import IntEnum

EXIT_CODE_OK = 0
EXIT_CODE_KO = 1


class Outcome(IntEnum):
    """Result of a batch: OK maps to exit code 0, KO to exit code 1."""

    OK = EXIT_CODE_OK
    KO = EXIT_CODE_KO

    @property
    def exit_code(self) -> int:
        return int(self)

    @classmethod
    def from_result(cls, result) -> "Outcome":
        # Only an Outcome or a plain int equal to KO fails
        if isinstance(result, int) and not isinstance(result, bool) and result == cls.KO:
            return cls.KO
        return cls.OK

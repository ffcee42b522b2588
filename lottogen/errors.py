class LottoError(Exception):
    """Base class for everything the generator raises on purpose."""


class ConstraintError(LottoError, ValueError):
    """An include/exclude request breaks one of the selection rules.

    ``rule`` is one of ``too_many_include``, ``too_many_exclude``,
    ``out_of_range`` or ``overlap`` so callers can tell them apart without
    parsing the message.
    """

    def __init__(self, rule, message):
        super().__init__(message)
        self.rule = rule


class SamplingError(LottoError, ValueError):
    pass


class ConfigError(LottoError):
    pass

"""
Run configuration for the frequency attack.

Ciphertext, key length and analysis switches live in a BreakerConfig,
filled from defaults, the environment, or the CLI (flags win over
environment, environment wins over defaults).
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .alphabet import clean_text, require_letters
from .errors import InvalidArgumentError

SAMPLE_CIPHERTEXT = (
    "WIEVHSMYRSMCVBPROJEFWPCQPQUVHSSEDNEHUPMLRINDUVNPHSSUFJEPFFFKFUIQQDLCVTIEWIEUKPCMZBVGUJDGUUHG"
    "QPVGOEEUFSIDHEHQZBRGEFLERNPWWFRRUPGTDNMGUDRGDUEFDQRQJSAOFBLNHETCSFWQUNWJLDHYDTRGOFAUHEIPWP"
    "APRNNKSPTGQUCQPQUVHSNGWXOTNVSGGCYCQBUVRDRCWJCIRWETQNEPWUOEROTTRMIVVQEQSMEVKFGQYFRPPFNVKBDV"
    "RUUTQPFHWIEERNPWWFRPHUWQULTJXTDGVURQBJNILUSEROTTRMIPRSDGUUOGUBDKFBTGWIEYRSMDUVNPHSSDRPKKVB"
    "BQXUAUFMOUHBSORTTXPTCQPQUVHSNGWXOTNNAPDHETVXOWOEEXHSHCYFCQPFTQDSECOSOIXFWQUNUPWJLVKFLCWFSY"
    "RSMUZFRGRCSEXSEVKJNIVNOTHBSURDICWFDYLUHTHTECUDHKQBCQPQUVHSLCEPRCWPRAIPRGABMROFAHHXBGQFVQOF"
    "NVZPROVXETHEEXHMORHEBAAFRQASEUHBREKFRUZIOYDOTGGUOODLEORSEGIGIELFNVXTEQIDOOSVTGUGAELMIVLFSV"
    "KFYFHWENRQEFDUOYQDRKHSWQUNWJLDHORWEFWIRQXHHCQFTYRSKUHODKQHOWWJMRRSTCQUAPQPUPFFMGQUSVKFITGJ"
    "AIQPSVLDWQUNANVPCQQTTCQULAZFAXHETJUPUIKUHGQFTYRSKDXUTJLT"
)
SAMPLE_KEY_LENGTH = 4
DEFAULT_TOP_N     = 3

ENV_PREFIX = "VIGENERE_"

_TRUE  = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class BreakerConfig:
    """
    Inputs and switches for one VigenereBreaker run.

    count_first_occurrence=False selects legacy counting,
    which starts every newly seen letter at 0.
    modular_offset=True swaps the absolute-difference key inference for
    (index - index('E')) mod 26.
    """

    ciphertext:             str  = SAMPLE_CIPHERTEXT
    key_length:             int  = SAMPLE_KEY_LENGTH
    top_n:                  int  = DEFAULT_TOP_N
    count_first_occurrence: bool = True
    modular_offset:         bool = False

    def validate(self) -> "BreakerConfig":
        require_letters(self.ciphertext, "ciphertext")
        if self.key_length <= 0:
            raise InvalidArgumentError(
                f"key_length must be positive, got {self.key_length}.")
        if self.key_length > len(self.ciphertext):
            raise InvalidArgumentError(
                f"key_length {self.key_length} exceeds ciphertext length "
                f"{len(self.ciphertext)}.")
        if self.top_n <= 0:
            raise InvalidArgumentError(f"top_n must be positive, got {self.top_n}.")
        return self

    def with_overrides(self, **changes) -> "BreakerConfig":
        """Copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BreakerConfig":
        """
        Build a config from VIGENERE_* variables:
            VIGENERE_CIPHERTEXT, VIGENERE_KEY_LENGTH, VIGENERE_TOP_N,
            VIGENERE_LEGACY_COUNT, VIGENERE_MODULAR_OFFSET
        Unset variables keep the defaults. The ciphertext gets the same
        whitespace and case cleanup as command-line input.
        """
        env = os.environ if environ is None else environ

        def get(name):
            return env.get(ENV_PREFIX + name)

        ciphertext = get("CIPHERTEXT")
        legacy = _flag(get("LEGACY_COUNT"), "LEGACY_COUNT")
        return cls().with_overrides(
            ciphertext=clean_text(ciphertext) if ciphertext is not None else None,
            key_length=_int(get("KEY_LENGTH"), "KEY_LENGTH"),
            top_n=_int(get("TOP_N"), "TOP_N"),
            count_first_occurrence=None if legacy is None else not legacy,
            modular_offset=_flag(get("MODULAR_OFFSET"), "MODULAR_OFFSET"),
        )


def _int(raw: Optional[str], name: str) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(
            f"{ENV_PREFIX}{name} must be an integer, got {raw!r}.") from None


def _flag(raw: Optional[str], name: str) -> Optional[bool]:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidArgumentError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}.")

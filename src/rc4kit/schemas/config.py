"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass, field


@dataclass
class CipherConfig:
    """Configuration for text handling around the cipher.

    Attributes:
        text_encoding: Codec used to turn ``str`` inputs and keys into bytes.
        text_errors: Error policy used when decoding plaintext back to ``str``.
    """

    text_encoding: str = "utf-8"
    text_errors: str = "strict"


@dataclass
class HostConfig:
    """Configuration for the handle-based host bindings.

    Attributes:
        max_buffers: Upper bound on live buffers in the arena, or ``None``
            for no limit.
        cipher_cfg: Text handling used by the bindings.
    """

    max_buffers: int | None = None
    cipher_cfg: CipherConfig = field(default_factory=CipherConfig)

from dataclasses import dataclass
from typing import Optional

from .engine import DEFAULT_MAX_ITER, validate_k, validate_max_iter


@dataclass
class KMeansConfig:
    input_path: str
    k: int
    output_path: Optional[str] = None
    max_iter: int = DEFAULT_MAX_ITER
    strict: bool = False

    def validate(self):
        """Raise ConfigError for a K or max_iter the engine would reject."""
        validate_k(self.k)
        validate_max_iter(self.max_iter)
        return self

    @classmethod
    def from_args(cls, args):
        return cls(
            input_path=args.input,
            k=args.k,
            output_path=args.output,
            max_iter=args.max_iter,
            strict=args.strict,
        ).validate()

"""Counter for tokens, lines, and characters in rendered trees.

A rendered tree is often pasted into a prompt for a language model, so the summary
can report how many tokens it will use. Token counting relies on OpenAI's tiktoken
library, which is an optional dependency; lines and characters are always counted.

For models tiktoken does not know, using a similar model's tokenizer (like gpt-4)
gives a useful approximation.
"""

import importlib.util
from collections import namedtuple
from typing import Any, Optional

from dirtree.exceptions import TokenizationError, TokenizerNotAvailableError

CountResult = namedtuple("CountResult", ["lines", "tokens", "characters"])


class TokenCounter:
    """Running totals for the text of a rendered tree.

    Every piece of text passed to ``count`` adds to the line and character totals.
    Tokens are only counted when a model was named; otherwise the token total stays
    None so callers can leave it out of a summary.

    Attributes:
        model (Optional[str]): Model whose tokenizer is used, or None.
        tiktoken_available (bool): Whether tiktoken can be imported.
        encoder (Optional[Any]): The loaded tiktoken encoding, or None without a model.

    Example:
        >>> counter = TokenCounter()
        >>> result = counter.count("R\\n└── a.txt\\n")
        >>> result.lines
        2
        >>> print(result.tokens)
        None

    Raises:
        ValueError: If the specified model's tokenizer cannot be loaded.
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
    """

    def __init__(self, model: Optional[str] = None):
        self.model = model
        self.tiktoken_available = self._check_tiktoken()
        self.encoder: Optional[Any] = None

        if self.model is not None:
            if not self.tiktoken_available:
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder()

        self._total_tokens: Optional[int] = None if self.encoder is None else 0
        self._total_lines = 0
        self._total_characters = 0

    def _check_tiktoken(self) -> bool:
        """Check if the tiktoken library is available."""
        return importlib.util.find_spec("tiktoken") is not None

    def _get_encoder(self) -> Any:
        """Get the tiktoken encoder for the configured model.

        Raises:
            ValueError: If the model's tokenizer cannot be loaded.
        """
        # Imported here so the module works without the optional dependency
        import tiktoken

        try:
            return tiktoken.encoding_for_model(self.model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{self.model}'. Consider using a "
                "well-supported model like 'gpt-4' (cl100k_base encoding) for token counting. "
                "While token counts may not exactly match your target model, they can provide "
                "useful approximations."
            )

    def count(self, text: str) -> CountResult:
        """Count lines, tokens, and characters in text and add them to the running totals.

        Args:
            text: A chunk of rendered output, usually one line.

        Returns:
            CountResult: Counts for this text. ``tokens`` is None when token counting is disabled.

        Raises:
            TokenizationError: If token counting is enabled but fails.
        """
        lines = text.count("\n")
        chars = len(text)
        tokens = None

        self._total_lines += lines
        self._total_characters += chars

        if self.encoder is not None:
            try:
                tokens = len(self.encoder.encode(text))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {str(e)}")
            self._total_tokens = (self._total_tokens or 0) + tokens

        return CountResult(lines=lines, tokens=tokens, characters=chars)

    def get_total_tokens(self) -> Optional[int]:
        """Total tokens counted so far, or None if token counting is disabled."""
        return self._total_tokens

    def get_total_lines(self) -> int:
        return self._total_lines

    def get_total_characters(self) -> int:
        return self._total_characters

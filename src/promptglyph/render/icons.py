"""Prompt icons in their plain and fancy forms."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Icon(BaseModel):
    """A symbol shown in a prompt, with the color spec it is usually drawn in."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    color: str = ""


class IconSet(BaseModel):
    """Every icon a prompt template can reference.

    Plain symbols render on any terminal; the fancy set uses glyphs that some
    terminals cannot display.
    """

    model_config = ConfigDict(frozen=True)

    help_input: Icon  # typed by the user to ask for more help
    error: Icon
    help: Icon
    question: Icon
    marked_option: Icon
    unmarked_option: Icon
    select_focus: Icon

    @classmethod
    def default(cls) -> IconSet:
        return cls(
            help_input=Icon(symbol="?", color="cyan"),
            error=Icon(symbol="X", color="red"),
            help=Icon(symbol="????", color="cyan"),
            question=Icon(symbol="?", color="green+hb"),
            marked_option=Icon(symbol="[x]", color="green"),
            unmarked_option=Icon(symbol="[ ]", color="default+hb"),
            select_focus=Icon(symbol=">", color="cyan"),
        )

    @classmethod
    def fancy(cls) -> IconSet:
        """The default set with fancy glyphs. The question icon is unchanged."""
        plain = cls.default()
        return plain.model_copy(
            update={
                "error": plain.error.model_copy(update={"symbol": "✘"}),
                "help": plain.help.model_copy(update={"symbol": "ⓘ"}),
                "marked_option": plain.marked_option.model_copy(update={"symbol": "◉"}),
                "unmarked_option": plain.unmarked_option.model_copy(update={"symbol": "◯"}),
                "select_focus": plain.select_focus.model_copy(update={"symbol": "❯"}),
            }
        )

    @classmethod
    def for_settings(cls, fancy: bool) -> IconSet:
        return cls.fancy() if fancy else cls.default()

    def helper_names(self) -> dict[str, Icon]:
        """Map template helper names (``QuestionIcon`` ...) to icons."""
        return {
            "HelpInputIcon": self.help_input,
            "ErrorIcon": self.error,
            "HelpIcon": self.help,
            "QuestionIcon": self.question,
            "MarkedOptionIcon": self.marked_option,
            "UnmarkedOptionIcon": self.unmarked_option,
            "SelectFocusIcon": self.select_focus,
        }

"""
Errors raised by the WordPress export conversion pipeline.

Every error carries a user-facing message (in Italian, like the generated
document) that the caller can show as-is.
"""

from typing import Optional


class ConversionError(Exception):
    """Base class for every failure that aborts a conversion."""

    default_message = "Errore durante l'elaborazione del file."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputKind(ConversionError):
    """The input is not an XML text file we can work with."""

    default_message = "Per favore seleziona un file XML valido."


class MalformedDocument(ConversionError):
    """The input is not well-formed XML or is not a WordPress export."""

    default_message = (
        "Il file XML non è valido. Assicurati che sia un export WordPress."
    )
    unrecognized_message = (
        "Formato XML non riconosciuto. Assicurati che sia un export WordPress."
    )


class ReadFailure(ConversionError):
    """The input file could not be read to completion."""

    default_message = "Impossibile leggere il file."

from dataclasses import asdict

class SheetsResourceBase():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    Gives every request/response struct the same translation to the raw
    dicts the discovery client wants.
    """
    def to_base(self) -> dict:
        """
        Default just return the dict representation of the object.
        Something with nested resources can override.
        Call fixup() first to ensure all fields are in correct format.
        """
        self.fixup()
        return asdict(self)

    def fixup(self) -> None:
        """
        notify a subclass to do any field adjustments
        """
        pass

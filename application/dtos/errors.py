class AppError:
    """Represents different categories of application errors."""

    def __init__(self, category: str, message: str) -> None:
        # 'validation', 'not_found', 'forbidden', 'upload_failed', 'infrastructure'
        self.category = category
        self.message = message

    def __str__(self) -> str:
        return self.message

"""Errors raised by the composition service."""


class CompositionNotFound(Exception):
    """No composition with the given id exists."""

    def __init__(self, composition_id: str):
        self.composition_id = composition_id
        super().__init__(f"Composition {composition_id} not found")

from .output_buffer import OutputBuffer

__all__ = [
    'OutputBuffer',
]

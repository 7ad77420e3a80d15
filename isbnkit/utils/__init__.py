from isbnkit.utils.messages import message_for

__all__ = ['message_for']

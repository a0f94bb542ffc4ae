from .phone_number import PhoneNumber

__all__ = ['PhoneNumber']

# fitcheck/models/__init__.py
# Carrega módulos para registrar tabelas no metadata:
from fitcheck.models.location import Location
from fitcheck.models.checkin import CheckIn
from fitcheck.models.user import User

__all__ = ["Location", "CheckIn", "User"]

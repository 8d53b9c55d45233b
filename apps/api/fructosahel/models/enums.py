from enum import StrEnum


class Locale(StrEnum):
    EN = "en"
    FR = "fr"


class UserRole(StrEnum):
    ADMIN = "admin"
    MANAGER = "manager"
    WORKER = "worker"
    VIEWER = "viewer"


class LivestockType(StrEnum):
    CHICKENS = "chickens"
    GUINEA_FOWL = "guinea_fowl"
    DUCKS = "ducks"
    SHEEP = "sheep"
    PIGS = "pigs"


class Country(StrEnum):
    BURKINA_FASO = "burkina_faso"
    MALI = "mali"
    NIGER = "niger"


class RuntimeMode(StrEnum):
    SERVER = "server"
    EDGE = "edge"


class RenderContext(StrEnum):
    SERVER = "server"
    CLIENT = "client"

from enum import Enum


class Locale(Enum):
    EN = 'EN'
    DE = 'DE'

    def toggled(self) -> 'Locale':
        return Locale.DE if self is Locale.EN else Locale.EN

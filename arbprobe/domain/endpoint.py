from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Endpoint:
    url: str
    name: str = ''

    def __str__(self):
        if self.name:
            return f'{self.name} - {self.url}'
        return self.url

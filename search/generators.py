from faker import Faker

from .documents import Document

_faker = Faker()


def fake_document() -> Document:
    return Document(username=_faker.user_name(), email=_faker.email(), real_name=_faker.name())

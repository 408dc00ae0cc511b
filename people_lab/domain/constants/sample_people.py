"""Records inserted by the demo sequence."""
from people_lab.domain.models.person import Person


JOAO = Person(
    name="João Silva",
    age=28,
    city="São Paulo",
    profession="Engineer",
    salary=8500.00,
)

MARIA = Person(
    name="Maria Oliveira",
    age=32,
    city="Rio de Janeiro",
    profession="Physician",
    salary=12000.00,
)

CARLOS = Person(
    name="Carlos Souza",
    age=25,
    city="Belo Horizonte",
    profession="Developer",
    salary=5500.00,
)

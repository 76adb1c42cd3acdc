from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Destination:
    """A single point of interest shown in the guide."""
    name: str
    neighborhood: str
    description: str
    latitude: float
    longitude: float
    image: str
    address: str

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.longitude}")

    @property
    def image_path(self):
        return f'assets/destinations/{self.image}.jpg'

    @property
    def map_link(self):
        return f'https://www.google.com/maps/search/?api=1&query={self.latitude},{self.longitude}'

    def to_dict(self):
        data = asdict(self)
        data['image_path'] = self.image_path
        data['map_link'] = self.map_link
        return data


def _unique_names(records):
    seen = set()
    for record in records:
        if record.name in seen:
            raise ValueError(f"Duplicate destination name: {record.name}")
        seen.add(record.name)
    return tuple(records)


destinations_data = _unique_names([
    Destination(
        name='Lago de Ilopango',
        neighborhood='Dolores Apulo',
        description='A breathtaking lake with deep blue waters, inviting visitors to swim, kayak, or embark on a scenic boat tour. You can also enjoy delicious bites from local snack and food stands, making it the perfect spot to relax and explore.',
        latitude=13.7000,
        longitude=-89.0833,
        image='salv1',
        address='Km. 16 Cantón Dolores, Carretera a Corinto, Ilopango, El Salvador'
    ),
    Destination(
        name='National Palace',
        neighborhood='San Salvador',
        description="A stunning architectural gem in the heart of the country's capital city. It was built in the early 20th century and is a historic landmark that showcases the country’s rich past.",
        latitude=13.6975,
        longitude=-89.1917,
        image='salv2',
        address='Avenida Cuscatlan, San Salvador, El Salvador'
    ),
    Destination(
        name='Finca Rauda',
        neighborhood='Alegria',
        description='A paradise full of adventures for nature lovers and thrill-seekers. They offer scenic trails, amazing viewpoints, RV riding, zip-lining, and camping. They also have a variety of delicious local cuisine.',
        latitude=13.50751,
        longitude=-88.48359,
        image='salv3',
        address='Cantón San Juan, Desvío a la Laguna de Alegría, Usulutan, El Salvador'
    ),
    Destination(
        name='Cuevas de Moncagua',
        neighborhood='Moncagua',
        description='This destination features crystal-clear thermal pools surrounded by ancient rock formations that create a cave. You can relax in the warm waters, rent chairs and tables, and enjoy snacks or fruits from the food stands.',
        latitude=13.5324,
        longitude=-88.2483,
        image='salv4',
        address='GQM2+2MQ, Moncagua, El Salvador'
    ),
    Destination(
        name='Biblioteca Nacional',
        neighborhood='San Salvador',
        description='Biblioteca Nacional de El Salvador (BINAES). A new modern library in the capital city. It has a vast collection of books, digital resources, and interactive spaces. BINAES offers a world of knowledge for all ages with engaging workshops and immersive exhibits.',
        latitude=13.6968,
        longitude=-89.1913,
        image='salv5',
        address='4 Calle Ote., San Salvador, El Salvador'
    ),
])

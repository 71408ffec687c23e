"""
Fixed vocabularies shared by the prompt builder and the validator
"""
from enum import Enum


class EventCategory(str, Enum):
    CONFERENCIA = "CONFERENCIA"
    WORKSHOP = "WORKSHOP"
    MEETUP = "MEETUP"
    WEBINAR = "WEBINAR"
    CURSO = "CURSO"
    PALESTRA = "PALESTRA"
    HACKATHON = "HACKATHON"


class EventFormat(str, Enum):
    PRESENCIAL = "PRESENCIAL"
    ONLINE = "ONLINE"
    HIBRIDO = "HIBRIDO"


class PriceType(str, Enum):
    A_PARTIR_DE = "a_partir_de"
    UNICO = "unico"
    NAO_INFORMADO = "nao_informado"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


CATEGORY_LABELS = {
    EventCategory.CONFERENCIA: "Conferência",
    EventCategory.WORKSHOP: "Workshop",
    EventCategory.MEETUP: "Meetup",
    EventCategory.WEBINAR: "Webinar",
    EventCategory.CURSO: "Curso",
    EventCategory.PALESTRA: "Palestra",
    EventCategory.HACKATHON: "Hackathon",
}

FORMAT_LABELS = {
    EventFormat.PRESENCIAL: "Presencial",
    EventFormat.ONLINE: "Online",
    EventFormat.HIBRIDO: "Híbrido",
}

# slug -> label, in the order the submission form shows them
TOPIC_LABELS = {
    "growth": "Growth",
    "seo": "SEO",
    "midia-paga": "Mídia Paga",
    "conteudo": "Conteúdo",
    "branding": "Branding",
    "inteligencia-artificial": "IA",
    "social-media": "Social Media",
    "dados-e-analytics": "Dados & Analytics",
    "crm": "CRM",
    "ecommerce": "E-commerce",
    "produto": "Produto",
    "email-marketing": "Email Marketing",
    "inbound-marketing": "Inbound Marketing",
    "performance": "Performance",
    "ux-e-design": "UX & Design",
    "video-e-streaming": "Vídeo & Streaming",
    "comunidade": "Comunidade",
    "lideranca-em-marketing": "Liderança em Marketing",
}

VALID_CATEGORIES = frozenset(c.value for c in EventCategory)
VALID_FORMATS = frozenset(f.value for f in EventFormat)
VALID_PRICE_TYPES = frozenset(p.value for p in PriceType)
VALID_TOPICS = frozenset(TOPIC_LABELS)

DEFAULT_ORGANIZER_NAME = "Organizador"
SLUG_MAX_LENGTH = 80

# Optional fields whose presence drives the confidence level
CONFIDENCE_FIELDS = (
    "description",
    "end_date",
    "start_time",
    "end_time",
    "city",
    "state",
    "address",
    "venue_name",
    "price_type",
    "ticket_url",
    "image_url",
    "organizer_url",
)
HIGH_CONFIDENCE_MIN_FIELDS = 8
MEDIUM_CONFIDENCE_MIN_FIELDS = 4

"""
Fixed vocabularies shared by the models, serializers and the suggestion
engine.  All of these are read-only for the lifetime of the process.
"""
from types import MappingProxyType

# Cities a doctor may practise in.  Suggestions are only served here too.
CITIES = ("Delhi", "Noida", "Faridabad")
ALLOWED_CITIES = frozenset(CITIES)

SPECIALITIES = ("Orthopaedic", "Gynecology", "Dermatology", "ENT")

SYMPTOMS = (
    "Arthritis",
    "Back Pain",
    "Tissue injuries",
    "Dysmenorrhea",
    "Skin infection",
    "skin burn",
    "Ear pain",
)

# Keys are case-sensitive: "skin burn" is lower case on purpose.
SYMPTOM_SPECIALITY = MappingProxyType({
    "Arthritis": "Orthopaedic",
    "Back Pain": "Orthopaedic",
    "Tissue injuries": "Orthopaedic",
    "Dysmenorrhea": "Gynecology",
    "Skin infection": "Dermatology",
    "skin burn": "Dermatology",
    "Ear pain": "ENT",
})

CITY_CHOICES = [(c, c) for c in CITIES]
SPECIALITY_CHOICES = [(s, s) for s in SPECIALITIES]
SYMPTOM_CHOICES = [(s, s) for s in SYMPTOMS]

NAME_MIN_LENGTH = 3
CITY_MAX_LENGTH = 20
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 255

NAME_MIN_MESSAGE = "Name must be at least 3 characters"
CITY_MAX_MESSAGE = "City must be at most 20 characters"
CITY_CHOICE_MESSAGE = "City must be Delhi, Noida or Faridabad"
PHONE_MIN_MESSAGE = "Phone number must be at least 10 digits"
SPECIALITY_MESSAGE = "Invalid speciality"
SYMPTOM_MESSAGE = "Invalid symptom"

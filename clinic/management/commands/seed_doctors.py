# clinic/management/commands/seed_doctors.py
from django.core.management.base import BaseCommand

from clinic.constants import CITIES, SPECIALITIES
from clinic.models import Doctor
from clinic.services.doctors import create_doctor

FIRST_NAMES = ['Priya', 'Amit', 'Suman', 'Neha', 'Karan', 'Pooja', 'Vikram', 'Anita', 'Ritu', 'Rahul', 'Meera', 'Ramesh']
LAST_NAMES = ['Sharma', 'Singh', 'Patel', 'Iyer', 'Nair', 'Bose', 'Kumar', 'Verma', 'Reddy', 'Desai', 'Kapoor', 'Gupta']


def roster(cities=CITIES):
    """One doctor per (city, speciality) pair, with stable names and emails."""
    rows = []
    for ci, city in enumerate(CITIES):
        if city not in cities:
            continue
        for si, speciality in enumerate(SPECIALITIES):
            n = ci * len(SPECIALITIES) + si
            fn = FIRST_NAMES[n % len(FIRST_NAMES)]
            ln = LAST_NAMES[(n * 5) % len(LAST_NAMES)]
            rows.append({
                'name': f"Dr. {fn} {ln}",
                'city': city,
                'email': f"{fn.lower()}.{ln.lower()}.{city.lower()}@example.com",
                'phone': f"98100{n:05d}",
                'speciality': speciality,
            })
    return rows


class Command(BaseCommand):
    help = "Ensure a sample doctor exists for every city and speciality (idempotent, keyed by email)."

    def add_arguments(self, parser):
        parser.add_argument('--city', choices=CITIES, help='Only seed doctors for this city.')

    def handle(self, *args, **opts):
        cities = (opts['city'],) if opts.get('city') else CITIES
        rows = roster(cities)
        created = 0
        for row in rows:
            if Doctor.objects.filter(email=row['email']).exists():
                continue
            doctor = create_doctor(**row)
            created += 1
            self.stdout.write(self.style.SUCCESS(f"created: {doctor}"))
        self.stdout.write(self.style.SUCCESS(f"{created} created, {len(rows) - created} already present."))

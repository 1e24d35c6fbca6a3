from django.core.management.base import BaseCommand

from contacts.errors import ContactValidationError
from contacts.models import Contact
from contacts.services import ContactStore

SAMPLE_CONTACTS = [
    {
        'name': 'Olena Kovalenko',
        'email': 'olena.kovalenko@example.com',
        'phone': '+380 (44) 123-4567',
        'message': 'Project manager, prefers email.',
        'category': 'Work',
    },
    {
        'name': 'Taras Shevchuk',
        'email': 'taras@example.com',
        'phone': '+380 67 765 4321',
        'message': '',
        'category': 'Friend',
    },
    {
        'name': 'Maria Bondar',
        'email': 'maria.bondar@example.org',
        'phone': '(050) 555-0199-12',
        'message': 'Birthday in May.',
        'category': 'Family',
    },
    {
        'name': 'Acme Supplies',
        'email': 'sales@acme.example.com',
        'phone': '+1 (555) 010-2030',
        'message': 'Office supplies vendor.',
        'category': 'Business',
    },
]


class Command(BaseCommand):
    help = 'Заповнення бази тестовими контактами'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Видалити всі наявні контакти перед заповненням',
        )

    def handle(self, *args, **options):
        if options['clear']:
            deleted, _ = Contact.objects.all().delete()
            self.stdout.write(f'Видалено контактів: {deleted}')

        store = ContactStore()
        created = 0
        for data in SAMPLE_CONTACTS:
            try:
                store.create(data)
            except ContactValidationError as exc:
                self.stderr.write(self.style.WARNING(f"{data['name']}: {'; '.join(exc.errors)}"))
                continue
            created += 1

        self.stdout.write(self.style.SUCCESS(f'База даних заповнена: створено контактів {created}.'))

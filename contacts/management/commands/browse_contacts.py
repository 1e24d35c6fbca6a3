from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from contacts.client import ContactsAPI, ContactSession, SORT_ORDERS


class Command(BaseCommand):
    help = 'Показує контакти з запущеного API (пошук, обрані, сортування, експорт)'

    def add_arguments(self, parser):
        parser.add_argument('--api-url', help='Базовий URL API, напр. http://localhost:8000/api')
        parser.add_argument('--search', default='', help="Підрядок імені, email або телефону")
        parser.add_argument('--favorites', action='store_true', help='Лише обрані контакти')
        parser.add_argument('--sort', choices=SORT_ORDERS, default='newest')
        parser.add_argument('--stats', action='store_true', help='Показати статистику')
        parser.add_argument(
            '--export', nargs='?', const='', default=None, metavar='PATH',
            help='Зберегти всі контакти у JSON (без PATH — contacts_<дата>.json)',
        )

    def handle(self, *args, **options):
        session = ContactSession(api=ContactsAPI(base_url=options['api_url']))
        if not session.load():
            raise CommandError(session.last_notice.message)

        book = session.book
        rows = book.visible(
            search=options['search'],
            favorites_only=options['favorites'],
            order=options['sort'],
        )
        self.stdout.write(f'Contacts ({len(rows)})')
        for c in rows:
            star = '*' if c.get('isFavorite') else ' '
            self.stdout.write(f"{star} {c['name']} <{c['email']}> {c['phone']} [{c.get('category') or 'Other'}]")

        if options['stats']:
            stats = book.statistics()
            self.stdout.write(
                f"Total: {stats['total']}  Favorites: {stats['favorites']}  "
                f"With messages: {stats['withMessages']}  Added today: {stats['addedToday']}"
            )

        if options['export'] is not None:
            path = Path(options['export'] or book.export_filename())
            path.write_text(book.export_json(), encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Contacts exported to {path}'))

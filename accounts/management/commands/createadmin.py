from django.core.management.base import BaseCommand, CommandError

from accounts.models import User


class Command(BaseCommand):
    help = 'Creates a staff superuser for the Django admin site'

    def add_arguments(self, parser):
        parser.add_argument('--username', type=str, help='Admin username', default='admin')
        parser.add_argument('--email', type=str, help='Admin email', default='admin@caredata.local')
        parser.add_argument('--password', type=str, help='Admin password', required=True)
        parser.add_argument('--full-name', type=str, help='Display name', default='CareData Admin')

    def handle(self, *args, **options):
        username = options['username']
        email = options['email']

        if User.objects.filter(username__iexact=username).exists():
            self.stdout.write(self.style.WARNING(f'User "{username}" already exists.'))
            return
        if User.objects.filter(email__iexact=email).exists():
            raise CommandError(f'Email "{email}" is already registered.')

        User.objects.create_superuser(
            username=username,
            email=email,
            password=options['password'],
            full_name=options['full_name'],
        )

        self.stdout.write(self.style.SUCCESS(f'Successfully created admin user "{username}"'))
        self.stdout.write(self.style.SUCCESS(f'Email: {email}'))

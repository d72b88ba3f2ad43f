from django.core.management.base import BaseCommand, CommandError

from SIXES.models import Games
from SIXES.services.report import format_scorecard_for_game, format_shareable_report


class Command(BaseCommand):
    help = 'Print the shareable results report for a game'

    def add_arguments(self, parser):
        parser.add_argument('game_id', type=int)
        parser.add_argument('--scorecard', action='store_true',
                            help='Also print the hole-by-hole scorecard')

    def handle(self, *args, **options):
        game_id = options['game_id']
        try:
            report = format_shareable_report(game_id)
        except Games.DoesNotExist:
            raise CommandError(f'Game {game_id} does not exist')

        self.stdout.write(report)

        if options['scorecard']:
            self.stdout.write(format_scorecard_for_game(game_id))

        self.stdout.write(self.style.SUCCESS(f'Report generated for game {game_id}'))

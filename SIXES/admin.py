from django.contrib import admin
from django.utils import timezone
from .models import Games, Players, Scores, TeamPairing


@admin.action(description="Mark selected games completed")
def complete_games(modeladmin, request, queryset):
    queryset.update(IsCompleted=True, CompletedAt=timezone.now())

@admin.action(description="Reopen selected games")
def reopen_games(modeladmin, request, queryset):
    queryset.update(IsCompleted=False, CompletedAt=None)


class PlayersInline(admin.TabularInline):
    model = Players
    extra = 0


@admin.register(Games)
class GamesAdmin(admin.ModelAdmin):
    list_display = ("id", "PlayDate", "Location", "BetUnit", "StartingHole", "CurrentHole", "IsCompleted")
    inlines = [PlayersInline]
    actions = [complete_games, reopen_games]


@admin.register(Scores)
class ScoresAdmin(admin.ModelAdmin):
    list_display = ("GameID", "PID", "HoleNumber", "Score", "Par")
    list_filter = ("GameID",)


@admin.register(TeamPairing)
class TeamPairingAdmin(admin.ModelAdmin):
    list_display = ("GameID", "Section", "Team1PID1", "Team1PID2", "Team2PID1", "Team2PID2")
    list_filter = ("GameID",)

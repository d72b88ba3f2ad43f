from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


HOLE_VALIDATORS = [MinValueValidator(1), MaxValueValidator(18)]


### Games Tables

class Games(models.Model):
    CreateDate = models.DateTimeField(auto_now_add=True)
    Location = models.CharField(max_length=256)
    PlayDate = models.DateField()
    BetUnit = models.DecimalField(max_digits=8, decimal_places=2, default=Decimal("1.00"),
                                  validators=[MinValueValidator(Decimal("0"))])
    StartingHole = models.IntegerField(default=1, validators=HOLE_VALIDATORS)  # origin of the section rotation
    CurrentHole = models.IntegerField(default=1, validators=HOLE_VALIDATORS)   # resume pointer
    IsCompleted = models.BooleanField(default=False)
    CompletedAt = models.DateTimeField(null=True, blank=True)
    MaxScore = models.IntegerField(default=10)  # input ceiling only, scoring ignores it

    class Meta:
        db_table = "Games"

    def __str__(self):
        return f"{self.Location} {self.PlayDate}"


class Players(models.Model):
    GameID = models.ForeignKey('Games', on_delete=models.CASCADE, related_name='players')
    Name = models.CharField(max_length=64)
    PlaysIndividual = models.BooleanField(default=True)  # opt-out for the individual game only

    class Meta:
        db_table = "Players"
        ordering = ["id"]

    def __str__(self):
        return self.Name


class Scores(models.Model):
    """
    One row = one player's strokes on one hole.
    Upserted hole by hole during play, never written by the results engine.
    """
    GameID = models.ForeignKey('Games', on_delete=models.CASCADE, related_name='scores')
    PID = models.ForeignKey('Players', on_delete=models.CASCADE, related_name='scores')
    HoleNumber = models.IntegerField(validators=HOLE_VALIDATORS)
    Score = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])
    Par = models.IntegerField(default=4, validators=[MinValueValidator(3), MaxValueValidator(5)])

    class Meta:
        db_table = "Scores"
        unique_together = ('GameID', 'PID', 'HoleNumber')  # one score per player per hole

    def __str__(self):
        return f"{self.GameID_id} P{self.PID_id} H{self.HoleNumber}: {self.Score}"


class TeamPairing(models.Model):
    """
    The two-vs-two split that applies for one 6-hole section.
    Exactly three rows per complete Game, one per canonical partition.
    """
    SECTION_CHOICES = [(1, "Section 1"), (2, "Section 2"), (3, "Section 3")]

    GameID    = models.ForeignKey('Games', on_delete=models.CASCADE, related_name='pairings')
    Section   = models.IntegerField(choices=SECTION_CHOICES)
    Team1PID1 = models.ForeignKey('Players', related_name='+', on_delete=models.CASCADE)
    Team1PID2 = models.ForeignKey('Players', related_name='+', on_delete=models.CASCADE)
    Team2PID1 = models.ForeignKey('Players', related_name='+', on_delete=models.CASCADE)
    Team2PID2 = models.ForeignKey('Players', related_name='+', on_delete=models.CASCADE)

    class Meta:
        db_table = "TeamPairing"
        unique_together = ('GameID', 'Section')

    @property
    def team1(self):
        return (self.Team1PID1_id, self.Team1PID2_id)

    @property
    def team2(self):
        return (self.Team2PID1_id, self.Team2PID2_id)

    def __str__(self):
        return f"{self.GameID_id} S{self.Section}: {self.team1} v {self.team2}"

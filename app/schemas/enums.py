"""
Closed value sets shared by the decision engine.

Every enum subclasses ``str`` so values serialise as their plain string
form in JSON responses.
"""

from enum import Enum


class FitnessGoal(str, Enum):
    """What the user is training for."""
    MUSCLE_GAIN = "muscle_gain"
    FAT_LOSS = "fat_loss"
    RECOMPOSITION = "recomposition"
    MAINTENANCE = "maintenance"


class ExperienceLevel(str, Enum):
    """Training experience; scales the readiness score."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Recommendation(str, Enum):
    """Training recommendation for the day."""
    FULL_WORKOUT = "full_workout"
    LIGHT_WORKOUT = "light_workout"
    ACTIVE_RECOVERY = "active_recovery"
    REST = "rest"

    @property
    def trains(self) -> bool:
        """Whether this recommendation counts as a training day."""
        return self in (Recommendation.FULL_WORKOUT, Recommendation.LIGHT_WORKOUT)


class PriorityCategory(str, Enum):
    TRAINING = "training"
    NUTRITION = "nutrition"
    HYDRATION = "hydration"
    SUPPLEMENTS = "supplements"
    RECOVERY = "recovery"
    MINDSET = "mindset"


class SessionFeeling(str, Enum):
    """How a set or session felt, as reported by the user."""
    EASY = "easy"
    CORRECT = "correct"
    HARD = "hard"


class AlertType(str, Enum):
    STAGNATION = "stagnation"
    CONSISTENCY = "consistency"
    FATIGUE = "fatigue"
    NUTRITION = "nutrition"
    PROGRESS = "progress"
    HYDRATION = "hydration"
    WEIGHT_CHANGE = "weight_change"


class AlertPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank: high=0, medium=1, low=2."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    AlertPriority.HIGH: 0,
    AlertPriority.MEDIUM: 1,
    AlertPriority.LOW: 2,
}


class AlertColor(str, Enum):
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"


class SupplementTiming(str, Enum):
    MORNING = "morning"
    PRE_WORKOUT = "pre_workout"
    POST_WORKOUT = "post_workout"
    WITH_MEAL = "with_meal"
    BEFORE_BED = "before_bed"


class SupplementPriority(str, Enum):
    ESSENTIAL = "essential"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACK = "snack"
    DINNER = "dinner"
    PRE_WORKOUT = "pre_workout"
    POST_WORKOUT = "post_workout"


class Confidence(str, Enum):
    """How much history backs a suggestion."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class LiftCategory(str, Enum):
    """Load-increment class of an exercise."""
    COMPOUND_UPPER = "compound_upper"
    COMPOUND_LOWER = "compound_lower"
    ISOLATION = "isolation"
    DEFAULT = "default"


class StrengthTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class PlateauFix(str, Enum):
    """Kind of change suggested to break a plateau."""
    INCREASE_VOLUME = "increase_volume"
    CHANGE_EXERCISE = "change_exercise"
    DELOAD = "deload"
    INCREASE_INTENSITY = "increase_intensity"


class HabitCategory(str, Enum):
    HYDRATION = "hydration"
    NUTRITION = "nutrition"
    RECOVERY = "recovery"
    MINDSET = "mindset"
    TRAINING = "training"
    SKIN = "skin"

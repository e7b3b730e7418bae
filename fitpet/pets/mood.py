"""Pet mood classification.

Mood is derived from the three bounded attributes, first match wins:

1. hunger < 30 -> hungry
2. happiness < 30 -> unhappy
3. health < 30 -> unhealthy
4. happiness > 80 and health > 80 -> happy
5. otherwise -> neutral

Hunger is checked first; it is the most urgent signal.

The six-way ``PetState`` used for motivational copy is a coarser view
derived from the same classification.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fitpet.domain.models import Pet

LOW_THRESHOLD = 30
HIGH_THRESHOLD = 80
EXCITED_THRESHOLD = 95
RESTING_HEALTH_THRESHOLD = 50


class PetMood(StrEnum):
    HUNGRY = "hungry"
    UNHAPPY = "unhappy"
    UNHEALTHY = "unhealthy"
    HAPPY = "happy"
    NEUTRAL = "default"


class PetState(StrEnum):
    HAPPY = "happy"
    SAD = "sad"
    TIRED = "tired"
    HUNGRY = "hungry"
    EXCITED = "excited"
    SLEEPING = "sleeping"


MOOD_MESSAGES: dict[PetMood, str] = {
    PetMood.NEUTRAL: "Let's crush today's workout! I believe in you!",
    PetMood.HUNGRY: "I'm getting a bit hungry. Could you feed me?",
    PetMood.UNHAPPY: "I'm feeling a bit down today. Want to play?",
    PetMood.UNHEALTHY: "I'm not feeling well. Can you help me?",
    PetMood.HAPPY: "I feel amazing today! Let's have a great workout!",
}

CARE_MESSAGES: dict[str, str] = {
    "feed": "Yum! Thank you for the food!",
    "play": "This is so fun! I love playing with you!",
    "groom": "I feel refreshed and clean now!",
    "workout": "You're doing great! Keep going!",
}

MOTIVATIONAL_MESSAGES: dict[PetState, list[str]] = {
    PetState.HAPPY: [
        "You're doing great! Keep it up!",
        "I'm proud of you for staying consistent!",
        "Your hard work is paying off!",
        "Let's crush this workout together!",
        "I believe in you!",
    ],
    PetState.EXCITED: [
        "WOW! You're amazing!",
        "This is fun! Let's do more!",
        "You're on fire today!",
        "I've never seen someone so strong!",
        "We make the best team ever!",
    ],
    PetState.TIRED: [
        "I'm a bit tired, but I'll still cheer for you!",
        "Let's both push through this together!",
        "One more rep! You can do it!",
        "Almost there! Don't give up!",
        "We both need a good rest after this!",
    ],
    PetState.HUNGRY: [
        "Let's finish this workout so we can both eat!",
        "My tummy is rumbling, but your health comes first!",
        "Food is fuel! Let's earn our meals!",
        "Working up an appetite together!",
        "After this, we'll both deserve a healthy snack!",
    ],
    PetState.SAD: [
        "Exercise always cheers me up!",
        "Seeing you work out makes me happy!",
        "Your dedication is inspiring!",
        "I feel better already watching you!",
        "Your progress is my happiness!",
    ],
    PetState.SLEEPING: [
        "I'm resting, but don't let that stop you!",
        "I'll dream of your fitness success!",
        "Wake me up when you're done so I can celebrate with you!",
        "Getting strong while I get my beauty sleep!",
        "Rest is important for recovery too!",
    ],
}

WORKOUT_COMPLETE_MESSAGES: dict[PetState, list[str]] = {
    PetState.HAPPY: [
        "Great job! You're getting stronger every day!",
        "I'm so proud of you! What a fantastic workout!",
        "You're making amazing progress! Keep it up!",
    ],
    PetState.EXCITED: [
        "WOW! That was AMAZING! Let's do it again tomorrow!",
        "You're my hero! That workout was incredible!",
        "I'm bouncing with joy! You're the best!",
    ],
    PetState.TIRED: [
        "That was tough, but you pushed through! Now we both need rest!",
        "Even though I'm tired, I'm so impressed with your workout!",
        "Let's both recover and come back stronger tomorrow!",
    ],
    PetState.HUNGRY: [
        "Now we've both earned a healthy meal! Great workout!",
        "Food time! You've definitely burned those calories!",
        "I'm hungry and you must be too after that awesome session!",
    ],
    PetState.SAD: [
        "Your workout has cheered me up! Thank you!",
        "I'm feeling better just seeing your dedication!",
        "You inspire me with your consistency!",
    ],
    PetState.SLEEPING: [
        "*Wakes up* Wow, you finished already? Great job!",
        "*Yawns* I missed it? I bet you were amazing!",
        "Your workout was so quiet it didn't even wake me up! Well done!",
    ],
}


@dataclass(frozen=True)
class MoodReading:
    mood: PetMood
    message: str
    state: PetState


def classify_mood(hunger: int, happiness: int, health: int) -> PetMood:
    """Classify attribute values into a mood (first matching rule wins)."""
    if hunger < LOW_THRESHOLD:
        return PetMood.HUNGRY
    if happiness < LOW_THRESHOLD:
        return PetMood.UNHAPPY
    if health < LOW_THRESHOLD:
        return PetMood.UNHEALTHY
    if happiness > HIGH_THRESHOLD and health > HIGH_THRESHOLD:
        return PetMood.HAPPY
    return PetMood.NEUTRAL


def derive_state(hunger: int, happiness: int, health: int) -> PetState:
    """Six-way presentation state driven by the mood classification."""
    mood = classify_mood(hunger, happiness, health)
    if mood is PetMood.HUNGRY:
        return PetState.HUNGRY
    if mood is PetMood.UNHAPPY:
        return PetState.SAD
    if mood is PetMood.UNHEALTHY:
        return PetState.TIRED
    if mood is PetMood.HAPPY:
        if min(hunger, happiness, health) >= EXCITED_THRESHOLD:
            return PetState.EXCITED
        return PetState.HAPPY
    if health < RESTING_HEALTH_THRESHOLD:
        return PetState.SLEEPING
    return PetState.HAPPY


def read_mood(pet: Pet) -> MoodReading:
    mood = classify_mood(pet.hunger, pet.happiness, pet.health)
    return MoodReading(
        mood=mood,
        message=MOOD_MESSAGES[mood],
        state=derive_state(pet.hunger, pet.happiness, pet.health),
    )

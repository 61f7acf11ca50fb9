from __future__ import annotations
from santa_scanner.schemas.question import Question

# naughtyPoints per option; the client sums them into a 0-100 nice score
_RAW = [
    {
        "id": 1,
        "text": "Did you help with chores around the house this year?",
        "options": [
            {"text": "Every single week", "naughtyPoints": 0},
            {"text": "When someone asked", "naughtyPoints": 5},
            {"text": "Only when bribed", "naughtyPoints": 10},
            {"text": "What are chores?", "naughtyPoints": 15},
        ],
    },
    {
        "id": 2,
        "text": "How often did you say please and thank you?",
        "options": [
            {"text": "Always", "naughtyPoints": 0},
            {"text": "Most of the time", "naughtyPoints": 4},
            {"text": "Sometimes", "naughtyPoints": 8},
            {"text": "Never", "naughtyPoints": 12},
        ],
    },
    {
        "id": 3,
        "text": "Did you share your snacks with friends?",
        "options": [
            {"text": "Yes, happily", "naughtyPoints": 0},
            {"text": "The ones I didn't like", "naughtyPoints": 6},
            {"text": "Only if they shared first", "naughtyPoints": 9},
            {"text": "Snacks are mine alone", "naughtyPoints": 13},
        ],
    },
    {
        "id": 4,
        "text": "Have you been kind to your siblings, pets or roommates?",
        "options": [
            {"text": "Kindest of them all", "naughtyPoints": 0},
            {"text": "Mostly kind", "naughtyPoints": 4},
            {"text": "We have a truce", "naughtyPoints": 8},
            {"text": "It's a war zone", "naughtyPoints": 12},
        ],
    },
    {
        "id": 5,
        "text": "Did you go to bed on time?",
        "options": [
            {"text": "Like clockwork", "naughtyPoints": 0},
            {"text": "Usually", "naughtyPoints": 3},
            {"text": "One more episode...", "naughtyPoints": 7},
            {"text": "Sleep is for the weak", "naughtyPoints": 10},
        ],
    },
    {
        "id": 6,
        "text": "Did you peek at any presents early?",
        "options": [
            {"text": "Never", "naughtyPoints": 0},
            {"text": "I shook one", "naughtyPoints": 5},
            {"text": "I peeled back the tape", "naughtyPoints": 10},
            {"text": "I already know everything", "naughtyPoints": 14},
        ],
    },
    {
        "id": 7,
        "text": "Did you help someone without being asked?",
        "options": [
            {"text": "Many times", "naughtyPoints": 0},
            {"text": "Once or twice", "naughtyPoints": 4},
            {"text": "I thought about it", "naughtyPoints": 8},
            {"text": "Not my problem", "naughtyPoints": 12},
        ],
    },
    {
        "id": 8,
        "text": "How did you handle losing a game?",
        "options": [
            {"text": "Congratulated the winner", "naughtyPoints": 0},
            {"text": "Grumbled a little", "naughtyPoints": 4},
            {"text": "Demanded a rematch", "naughtyPoints": 7},
            {"text": "Flipped the board", "naughtyPoints": 12},
        ],
    },
]

QUESTIONS: list[Question] = [Question.model_validate(q) for q in _RAW]

"""Rotation pools for daily habits and exercises."""

from fitness_tracker.domain.content import ExerciseTemplate, HabitTemplate

BODY_FAT_LOSS_HABITS: list[HabitTemplate] = [
    HabitTemplate(
        "water", "Drink 3 liters of water", "Stay hydrated throughout the day",
        "water", "#2196F3",
    ),
    HabitTemplate(
        "steps", "Walk 10,000 steps", "Track your daily movement",
        "footsteps", "#FF9800",
    ),
    HabitTemplate(
        "protein", "Eat protein with every meal", "Prioritize lean protein sources",
        "nutrition", "#4CAF50",
    ),
    HabitTemplate(
        "sleep", "Sleep 7-8 hours", "Quality sleep for recovery", "moon", "#9C27B0"
    ),
    HabitTemplate(
        "resistance", "30 min resistance training", "Build muscle, burn fat",
        "barbell", "#E85D04",
    ),
    HabitTemplate(
        "track-meals", "Track all meals in app", "Maintain calorie awareness",
        "restaurant", "#F44336",
    ),
    HabitTemplate(
        "no-late-eating", "No eating 3 hours before bed",
        "Improve sleep and digestion", "time", "#607D8B",
    ),
    HabitTemplate(
        "sunlight", "Morning sunlight exposure", "Get 10-15 min of natural light",
        "sunny", "#FFA726",
    ),
    HabitTemplate(
        "no-liquid-calories", "Avoid liquid calories",
        "No soda, juice, or sugary drinks", "close-circle", "#EF5350",
    ),
    HabitTemplate(
        "vegetables", "Eat vegetables with lunch & dinner",
        "Fill half your plate with veggies", "leaf", "#66BB6A",
    ),
    HabitTemplate(
        "push-ups", "Do 20 push-ups", "Build upper body strength",
        "fitness", "#E85D04",
    ),
    HabitTemplate(
        "stretch", "Stretch for 10 minutes", "Improve flexibility and mobility",
        "body", "#AB47BC",
    ),
    HabitTemplate(
        "whole-foods", "Avoid processed foods", "Choose whole, natural foods",
        "fast-food", "#FF7043",
    ),
    HabitTemplate(
        "post-meal-walk", "Take 10 min walk after meals",
        "Aid digestion, control blood sugar", "walk", "#FF9800",
    ),
    HabitTemplate(
        "mindful-eating", "Practice mindful eating", "Eat slowly, no distractions",
        "happy", "#FDD835",
    ),
    HabitTemplate(
        "cardio", "20 min cardio session", "Elevate heart rate for fat burn",
        "heart", "#E91E63",
    ),
    HabitTemplate(
        "plan-meals", "Plan tomorrow's meals", "Prep for success",
        "calendar", "#42A5F5",
    ),
    HabitTemplate(
        "weigh-in", "Weigh yourself", "Track progress weekly", "fitness", "#8D6E63"
    ),
    HabitTemplate(
        "progress-photo", "Take progress photo", "Visual tracking once a week",
        "camera", "#26A69A",
    ),
    HabitTemplate(
        "review-wins", "Review today's wins", "Reflect on achievements",
        "checkmark-done", "#66BB6A",
    ),
]

CARDIO_EXERCISES: list[ExerciseTemplate] = [
    ExerciseTemplate(
        "hiit", "HIIT Sprint Intervals", "Boost metabolism, burn fat",
        "20 min", 300, "fitness",
    ),
    ExerciseTemplate(
        "jump-rope", "Jump Rope", "Full-body cardio workout", "15 min", 220, "heart"
    ),
    ExerciseTemplate(
        "cycling", "Cycling", "Low-impact leg strengthener", "30 min", 280, "bicycle"
    ),
    ExerciseTemplate(
        "swimming", "Swimming", "Full-body, low-impact workout",
        "30 min", 350, "water",
    ),
    ExerciseTemplate(
        "stairs", "Stair Climbing", "Intense calorie burner",
        "20 min", 240, "trending-up",
    ),
    ExerciseTemplate(
        "rowing", "Rowing Machine", "Strength and endurance builder",
        "25 min", 310, "boat",
    ),
    ExerciseTemplate(
        "burpees", "Burpees Circuit", "Explosive full-body exercise",
        "15 min", 250, "fitness",
    ),
    ExerciseTemplate(
        "elliptical", "Elliptical Training", "Low-impact total body",
        "30 min", 270, "walk",
    ),
    ExerciseTemplate(
        "running", "Running", "Classic endurance builder", "30 min", 320, "walk"
    ),
    ExerciseTemplate(
        "mountain-climbers", "Mountain Climbers", "Core and agility workout",
        "15 min", 200, "fitness",
    ),
]

STRENGTH_EXERCISES: list[ExerciseTemplate] = [
    ExerciseTemplate(
        "push-ups", "Push-ups", "Chest, shoulders, triceps builder",
        "15 min", 100, "body",
    ),
    ExerciseTemplate(
        "squats", "Squats", "Leg strength and power", "20 min", 150, "barbell"
    ),
    ExerciseTemplate(
        "deadlifts", "Deadlifts", "Full-body strength builder",
        "25 min", 180, "barbell",
    ),
    ExerciseTemplate(
        "bench-press", "Bench Press", "Upper body strength", "25 min", 160, "barbell"
    ),
    ExerciseTemplate(
        "pull-ups", "Pull-ups", "Back and arm strength", "15 min", 120, "body"
    ),
    ExerciseTemplate(
        "lunges", "Lunges", "Balance and leg strength", "20 min", 140, "walk"
    ),
    ExerciseTemplate(
        "shoulder-press", "Shoulder Press", "Shoulder strength and stability",
        "20 min", 130, "barbell",
    ),
    ExerciseTemplate(
        "bicep-curls", "Bicep Curls", "Arm strength isolation",
        "15 min", 90, "fitness",
    ),
    ExerciseTemplate(
        "tricep-dips", "Tricep Dips", "Back of arms strength", "15 min", 110, "body"
    ),
    ExerciseTemplate(
        "plank", "Plank Hold", "Core stability builder", "10 min", 50, "body"
    ),
    ExerciseTemplate(
        "leg-press", "Leg Press", "Safe lower body strength",
        "20 min", 150, "barbell",
    ),
    ExerciseTemplate(
        "dumbbell-rows", "Dumbbell Rows", "Back strength and posture",
        "20 min", 140, "barbell",
    ),
]

EXERCISES_PER_DIFFICULTY: dict[str, int] = {
    "easy": 1,
    "medium": 2,
    "hard": 3,
}
DEFAULT_DIFFICULTY = "medium"

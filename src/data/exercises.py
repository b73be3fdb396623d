"""Source exercise catalog.

Entries follow the source schema (see RawExercise): category, target muscle,
equipment, level and the injuries that rule an exercise out.
"""

RAW_EXERCISES = [
    # Chest
    {
        "id": "ex_push_up",
        "name": "Push-Up",
        "instructions": "Hands slightly wider than shoulders, body straight. Lower your chest to the floor and press back up.",
        "category": "strength",
        "target_muscle": "chest",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": ["shoulder"],
    },
    {
        "id": "ex_incline_push_up",
        "name": "Incline Push-Up",
        "instructions": "Hands on a bench or sturdy table. Lower your chest to the edge and push away.",
        "category": "strength",
        "target_muscle": "chest",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_dumbbell_floor_press",
        "name": "Dumbbell Floor Press",
        "instructions": "Lie on the floor with dumbbells over your chest. Lower until your elbows touch the floor, then press.",
        "category": "strength",
        "target_muscle": "chest",
        "equipment": "dumbbell",
        "level": "intermediate",
        "excluded_injuries": ["shoulder"],
    },
    {
        "id": "ex_barbell_bench_press",
        "name": "Barbell Bench Press",
        "instructions": "Grip the bar just outside shoulder width, lower it to mid-chest under control and press to lockout.",
        "category": "strength",
        "target_muscle": "chest",
        "equipment": "barbell",
        "level": "advanced",
        "excluded_injuries": ["shoulder", "back"],
    },
    {
        "id": "ex_chest_press_machine",
        "name": "Machine Chest Press",
        "instructions": "Adjust the seat so the handles are at chest height. Press forward without locking the elbows.",
        "category": "strength",
        "target_muscle": "chest",
        "equipment": "gym_machine",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_cable_fly",
        "name": "Cable Fly",
        "instructions": "Stand between the pulleys with a slight elbow bend and bring the handles together in front of your chest.",
        "category": "strength",
        "target_muscle": "chest",
        "equipment": "gym_machine",
        "level": "intermediate",
        "excluded_injuries": ["shoulder"],
    },
    {
        "id": "ex_decline_push_up",
        "name": "Decline Push-Up",
        "instructions": "Feet elevated on a chair, hands on the floor. Keep your core tight as you lower and press.",
        "category": "strength",
        "target_muscle": "chest",
        "equipment": "bodyweight",
        "level": "advanced",
        "excluded_injuries": ["shoulder"],
    },
    {
        "id": "ex_pike_push_up",
        "name": "Pike Push-Up",
        "instructions": "Hips high in an inverted V. Bend the elbows to bring your head toward the floor, then press.",
        "category": "strength",
        "target_muscle": "chest",
        "equipment": "bodyweight",
        "level": "intermediate",
        "excluded_injuries": ["shoulder"],
    },
    # Back
    {
        "id": "ex_superman",
        "name": "Superman Hold",
        "instructions": "Lie face down, lift arms, chest and legs off the floor and hold for two seconds per rep.",
        "category": "strength",
        "target_muscle": "back",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": ["back"],
    },
    {
        "id": "ex_band_row",
        "name": "Resistance Band Row",
        "instructions": "Anchor the band at chest height and pull the handles to your ribs, squeezing the shoulder blades.",
        "category": "strength",
        "target_muscle": "back",
        "equipment": "band",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_dumbbell_row",
        "name": "One-Arm Dumbbell Row",
        "instructions": "Brace one hand on a bench and row the dumbbell to your hip, keeping your back flat.",
        "category": "strength",
        "target_muscle": "back",
        "equipment": "dumbbell",
        "level": "intermediate",
        "excluded_injuries": ["back"],
    },
    {
        "id": "ex_pull_up",
        "name": "Pull-Up",
        "instructions": "Hang from the bar with an overhand grip and pull until your chin clears it.",
        "category": "strength",
        "target_muscle": "back",
        "equipment": "bodyweight",
        "level": "advanced",
        "excluded_injuries": ["shoulder"],
    },
    {
        "id": "ex_lat_pulldown",
        "name": "Lat Pulldown",
        "instructions": "Pull the bar to your upper chest while leaning back slightly, then return it slowly.",
        "category": "strength",
        "target_muscle": "back",
        "equipment": "gym_machine",
        "level": "beginner",
        "excluded_injuries": ["shoulder"],
    },
    {
        "id": "ex_seated_cable_row",
        "name": "Seated Cable Row",
        "instructions": "Sit tall, pull the handle to your waist and pause before extending your arms.",
        "category": "strength",
        "target_muscle": "back",
        "equipment": "gym_machine",
        "level": "intermediate",
        "excluded_injuries": ["back"],
    },
    {
        "id": "ex_barbell_deadlift",
        "name": "Barbell Deadlift",
        "instructions": "Hinge at the hips with a neutral spine and stand up with the bar close to your legs.",
        "category": "strength",
        "target_muscle": "back",
        "equipment": "barbell",
        "level": "advanced",
        "excluded_injuries": ["back", "knee"],
    },
    {
        "id": "ex_towel_row",
        "name": "Inverted Table Row",
        "instructions": "Lie under a sturdy table, grip the edge and pull your chest up to it with a straight body.",
        "category": "strength",
        "target_muscle": "back",
        "equipment": "bodyweight",
        "level": "intermediate",
        "excluded_injuries": ["shoulder"],
    },
    # Legs
    {
        "id": "ex_bodyweight_squat",
        "name": "Bodyweight Squat",
        "instructions": "Feet shoulder width apart, sit the hips back and down until thighs are parallel, then stand.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": ["knee"],
    },
    {
        "id": "ex_glute_bridge",
        "name": "Glute Bridge",
        "instructions": "Lie on your back with knees bent and drive your hips up until your body forms a straight line.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_reverse_lunge",
        "name": "Reverse Lunge",
        "instructions": "Step back and lower the back knee toward the floor, then return to standing.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "bodyweight",
        "level": "intermediate",
        "excluded_injuries": ["knee"],
    },
    {
        "id": "ex_goblet_squat",
        "name": "Goblet Squat",
        "instructions": "Hold a dumbbell at your chest and squat deep while keeping your chest up.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "dumbbell",
        "level": "intermediate",
        "excluded_injuries": ["knee", "back"],
    },
    {
        "id": "ex_jump_squat",
        "name": "Jump Squat",
        "instructions": "Squat down and jump explosively, landing softly back into the squat.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "bodyweight",
        "level": "advanced",
        "excluded_injuries": ["knee", "back"],
    },
    {
        "id": "ex_leg_press",
        "name": "Leg Press",
        "instructions": "Place feet mid-platform, lower the sled until knees reach ninety degrees and press back.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "gym_machine",
        "level": "beginner",
        "excluded_injuries": ["knee"],
    },
    {
        "id": "ex_leg_curl",
        "name": "Lying Leg Curl",
        "instructions": "Curl the pad toward your glutes and lower it slowly.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "gym_machine",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_barbell_back_squat",
        "name": "Barbell Back Squat",
        "instructions": "Bar on the upper back, brace and squat to depth, driving up through the whole foot.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "barbell",
        "level": "advanced",
        "excluded_injuries": ["knee", "back"],
    },
    {
        "id": "ex_calf_raise",
        "name": "Standing Calf Raise",
        "instructions": "Rise onto the balls of your feet, pause at the top and lower under control.",
        "category": "strength",
        "target_muscle": "legs",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": [],
    },
    # Core
    {
        "id": "ex_plank",
        "name": "Plank",
        "instructions": "Forearms on the floor, body straight from head to heels. Hold without letting the hips sag.",
        "category": "strength",
        "target_muscle": "core",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": ["shoulder"],
    },
    {
        "id": "ex_dead_bug",
        "name": "Dead Bug",
        "instructions": "On your back with arms up and knees bent, extend the opposite arm and leg while pressing your back down.",
        "category": "strength",
        "target_muscle": "core",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_bicycle_crunch",
        "name": "Bicycle Crunch",
        "instructions": "Bring the opposite elbow toward the opposite knee while extending the other leg.",
        "category": "strength",
        "target_muscle": "core",
        "equipment": "bodyweight",
        "level": "intermediate",
        "excluded_injuries": ["back"],
    },
    {
        "id": "ex_russian_twist",
        "name": "Russian Twist",
        "instructions": "Sit leaning back with feet raised and rotate the torso side to side.",
        "category": "strength",
        "target_muscle": "core",
        "equipment": "bodyweight",
        "level": "intermediate",
        "excluded_injuries": ["back"],
    },
    {
        "id": "ex_hanging_leg_raise",
        "name": "Hanging Leg Raise",
        "instructions": "Hang from a bar and lift straight legs to hip height without swinging.",
        "category": "strength",
        "target_muscle": "core",
        "equipment": "bodyweight",
        "level": "advanced",
        "excluded_injuries": ["shoulder", "back"],
    },
    {
        "id": "ex_cable_crunch",
        "name": "Cable Crunch",
        "instructions": "Kneel facing the pulley with the rope at your head and crunch down through the abs.",
        "category": "strength",
        "target_muscle": "core",
        "equipment": "gym_machine",
        "level": "intermediate",
        "excluded_injuries": ["back"],
    },
    # Full body (normalized as push)
    {
        "id": "ex_burpee",
        "name": "Burpee",
        "instructions": "Squat, kick back into a plank, do a push-up, jump the feet in and leap up.",
        "category": "strength",
        "target_muscle": "full_body",
        "equipment": "bodyweight",
        "level": "advanced",
        "excluded_injuries": ["knee", "back", "shoulder"],
    },
    {
        "id": "ex_kettlebell_swing",
        "name": "Kettlebell Swing",
        "instructions": "Hinge and swing the kettlebell to chest height by snapping the hips forward.",
        "category": "strength",
        "target_muscle": "full_body",
        "equipment": "kettlebell",
        "level": "intermediate",
        "excluded_injuries": ["back"],
    },
    {
        "id": "ex_dumbbell_thruster",
        "name": "Dumbbell Thruster",
        "instructions": "Front squat with dumbbells at the shoulders and press them overhead as you stand.",
        "category": "strength",
        "target_muscle": "full_body",
        "equipment": "dumbbell",
        "level": "intermediate",
        "excluded_injuries": ["knee", "shoulder"],
    },
    # Cardio
    {
        "id": "ex_brisk_walk",
        "name": "Brisk Walk",
        "instructions": "Walk at a pace where you can talk but not sing.",
        "category": "cardio",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_jumping_jacks",
        "name": "Jumping Jacks",
        "instructions": "Jump the feet out while raising the arms overhead, then return.",
        "category": "cardio",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": ["knee"],
    },
    {
        "id": "ex_high_knees",
        "name": "High Knees",
        "instructions": "Run in place driving the knees up to hip height.",
        "category": "cardio",
        "equipment": "bodyweight",
        "level": "intermediate",
        "excluded_injuries": ["knee"],
    },
    {
        "id": "ex_stationary_bike",
        "name": "Stationary Bike",
        "instructions": "Pedal at a steady moderate effort with the seat at hip height.",
        "category": "cardio",
        "equipment": "gym_machine",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_rowing_machine",
        "name": "Rowing Machine",
        "instructions": "Drive with the legs, then lean back and pull the handle to your ribs.",
        "category": "cardio",
        "equipment": "gym_machine",
        "level": "intermediate",
        "excluded_injuries": ["back"],
    },
    {
        "id": "ex_treadmill_intervals",
        "name": "Treadmill Intervals",
        "instructions": "Alternate one minute fast running with one minute easy walking.",
        "category": "cardio",
        "equipment": "gym_machine",
        "level": "advanced",
        "excluded_injuries": ["knee"],
    },
    {
        "id": "ex_shadow_boxing",
        "name": "Shadow Boxing",
        "instructions": "Throw light punch combinations while staying on the balls of your feet.",
        "category": "cardio",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": ["shoulder"],
    },
    {
        "id": "ex_mountain_climbers",
        "name": "Mountain Climbers",
        "instructions": "From a high plank, drive the knees toward the chest one after the other.",
        "category": "cardio",
        "equipment": "bodyweight",
        "level": "intermediate",
        "excluded_injuries": ["shoulder", "knee"],
    },
    # Flexibility
    {
        "id": "ex_cat_cow",
        "name": "Cat-Cow",
        "instructions": "On hands and knees, alternate arching and rounding the spine with your breath.",
        "category": "flexibility",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": [],
    },
    {
        "id": "ex_hip_flexor_stretch",
        "name": "Kneeling Hip Flexor Stretch",
        "instructions": "Half kneel and shift the hips forward until you feel the stretch in the front of the hip.",
        "category": "flexibility",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": ["knee"],
    },
    {
        "id": "ex_hamstring_stretch",
        "name": "Seated Hamstring Stretch",
        "instructions": "Sit with legs straight and hinge forward from the hips toward your toes.",
        "category": "flexibility",
        "equipment": "bodyweight",
        "level": "beginner",
        "excluded_injuries": ["back"],
    },
]

"""Built-in calisthenics progressions.

Each line runs from the entry-level movement to its apex skill. MET values
are per node and feed the skill-detail calorie estimate.
"""

from __future__ import annotations

from kinetic.skills.models import SkillKind, SkillLine, SkillNode

REPS = SkillKind.REPS
STATIC = SkillKind.STATIC

CALISTHENICS_SKILLS: tuple[SkillLine, ...] = (
    SkillLine(
        "push_basic",
        "PUSH • PUSH-UPS",
        "#a35b4d",
        (
            SkillNode("pu1", "Wall Push-Up", REPS, "3x20", 3.8, "Standing press against wall.", "Keep body straight."),
            SkillNode("pu2", "Incline Push-Up", REPS, "3x15", 3.8, "Hands on bench/bar.", "Lower chest to edge."),
            SkillNode("pu3", "Knee Push-Up", REPS, "3x15", 3.8, "Knees on ground.", "Maintain hip line."),
            SkillNode("pu4", "Standard Push-Up", REPS, "3x20", 3.8, "Full plank position.", "Chest to floor."),
            SkillNode("pu5", "Diamond Push-Up", REPS, "3x12", 7.5, "Hands touching.", "Tricep dominance."),
            SkillNode("pu6", "Archer Push-Up", REPS, "3x10/side", 7.5, "Side-to-side shift.", "Straight arm support."),
            SkillNode("pu7", "One-Arm Push-Up", REPS, "5/side", 8.0, "The apex press.", "Feet wide for balance."),
        ),
    ),
    SkillLine(
        "push_planche",
        "PUSH • PLANCHE",
        "#a35b4d",
        (
            SkillNode("pl1", "Frog Stand", STATIC, "30s", 3.0, "Knees on elbows.", "Balance focus."),
            SkillNode("pl2", "Tuck Planche", STATIC, "10s", 3.2, "Arms straight, knees tucked.", "Scapular protraction."),
            SkillNode("pl3", "Adv. Tuck Planche", STATIC, "10s", 3.5, "Back flat, hips open.", "Increased leverage."),
            SkillNode("pl4", "Straddle Planche", STATIC, "5s", 3.8, "Legs wide straight.", "Forward lean."),
            SkillNode("pl5", "Full Planche", STATIC, "5s", 4.0, "Body straight horizontal.", "Apex static hold."),
        ),
    ),
    SkillLine(
        "pull_basic",
        "PULL • PULL-UPS",
        "#4f5d4e",
        (
            SkillNode("pb1", "Wall/Door Pull", REPS, "3x15", 3.0, "Pulling against doorframe.", "Scapular retraction."),
            SkillNode("pb2", "Inverted Row", REPS, "3x15", 3.8, "Horizontal pull under bar.", "Chest to bar."),
            SkillNode("pb3", "Negative Pull-Up", REPS, "3x5 (5s)", 4.0, "Slow descent.", "Control gravity."),
            SkillNode("pb4", "Pull-Up", REPS, "3x10", 5.0, "Chin over bar.", "Full range."),
            SkillNode("pb5", "Narrow/Weighted", REPS, "3x8", 7.5, "Close grip or +weight.", "Increased intensity."),
            SkillNode("pb6", "Archer Pull-Up", REPS, "3x5/side", 7.5, "Pull to one arm.", "Straight assist arm."),
            SkillNode("pb7", "One-Arm Pull-Up", REPS, "1 rep", 8.0, "Apex vertical pull.", "Anti-rotation."),
        ),
    ),
    SkillLine(
        "pull_front_lever",
        "PULL • FRONT LEVER",
        "#4f5d4e",
        (
            SkillNode("fl1", "Tuck Lever", STATIC, "10s", 3.0, "Hanging, knees to chest.", "Back parallel."),
            SkillNode("fl2", "Adv. Tuck Lever", STATIC, "10s", 3.2, "Back flat.", "Lats engaged."),
            SkillNode("fl3", "One-Leg Lever", STATIC, "10s", 3.5, "One leg extended.", "Switch sides."),
            SkillNode("fl4", "Straddle Lever", STATIC, "5s", 3.8, "Legs wide.", "Glutes active."),
            SkillNode("fl5", "Full Front Lever", STATIC, "5s", 4.0, "Straight body horizontal.", "Apex hold."),
        ),
    ),
    SkillLine(
        "pull_back_lever",
        "PULL • BACK LEVER",
        "#4f5d4e",
        (
            SkillNode("bl1", "Tuck Back Lever", STATIC, "10s", 3.0, "Face down, tucked.", "Skin the cat entry."),
            SkillNode("bl2", "Adv. Tuck Back", STATIC, "10s", 3.2, "Flat back.", "Shoulder extension."),
            SkillNode("bl3", "Straddle Back", STATIC, "5s", 3.5, "Legs wide.", "Glutes tight."),
            SkillNode("bl4", "Full Back Lever", STATIC, "5s", 3.8, "Straight body.", "Apex posterior hold."),
        ),
    ),
    SkillLine(
        "core_dynamic",
        "CORE • LEG RAISES",
        "#2a2a2a",
        (
            SkillNode("cd1", "Lying Knee Raise", REPS, "3x15", 3.8, "Floor, knees to chest.", "Flat lower back."),
            SkillNode("cd2", "Lying Leg Raise", REPS, "3x15", 3.8, "Straight legs up.", "No swing."),
            SkillNode("cd3", "Hanging Knee Raise", REPS, "3x15", 4.5, "Hanging from bar.", "Control swing."),
            SkillNode("cd4", "Hanging Leg Raise", REPS, "3x12", 5.0, "Toes to 90 degrees.", "Compress abs."),
            SkillNode("cd5", "Toes-to-Bar", REPS, "3x10", 6.0, "Toes touch bar.", "Full compression."),
        ),
    ),
    SkillLine(
        "core_static",
        "CORE • L-SIT / V-SIT",
        "#2a2a2a",
        (
            SkillNode("cs1", "Foot Supported L", STATIC, "20s", 3.0, "Hands on floor, feet down.", "Depress shoulders."),
            SkillNode("cs2", "Tuck L-Sit", STATIC, "15s", 3.0, "Knees tucked, feet up.", "Core brace."),
            SkillNode("cs3", "Full L-Sit", STATIC, "15s", 3.2, "Legs straight out.", "Quad cramp warning."),
            SkillNode("cs4", "Straddle L-Sit", STATIC, "10s", 3.5, "Legs wide.", "Hip flexor heavy."),
            SkillNode("cs5", "V-Sit", STATIC, "10s", 4.0, "Legs vertical.", "Apex compression."),
        ),
    ),
    SkillLine(
        "balance",
        "BALANCE • HANDSTAND",
        "#2a2a2a",
        (
            SkillNode("ba1", "Wall Hold", STATIC, "45s", 3.0, "Chest to wall.", "Alignment drill."),
            SkillNode("ba2", "Wall Walks", REPS, "3x3", 4.0, "Walk feet up wall.", "Shoulder endurance."),
            SkillNode("ba3", "HS Kick-Ups", REPS, "10 attempts", 3.5, "Scissor kick entry.", "Find balance point."),
            SkillNode("ba4", "Freestanding HS", STATIC, "10s", 3.5, "No wall support.", "Finger control."),
        ),
    ),
    SkillLine(
        "legs",
        "LEGS • SQUAT / PISTOL",
        "#a35b4d",
        (
            SkillNode("lg1", "Air Squat", REPS, "3x20", 3.7, "Bodyweight squat.", "Depth below parallel."),
            SkillNode("lg2", "Split Squat", REPS, "3x12/leg", 5.0, "Static lunge position.", "Vertical torso."),
            SkillNode("lg3", "Assisted Pistol", REPS, "3x8/leg", 6.0, "Holding pole/TRX.", "One leg focus."),
            SkillNode("lg4", "Box Pistol", REPS, "3x5/leg", 6.5, "Sit to box.", "Control descent."),
            SkillNode("lg5", "Full Pistol", REPS, "3x5/leg", 7.5, "Unassisted one leg.", "Mobility & Strength."),
        ),
    ),
)

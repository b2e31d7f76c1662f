"""
Seed records and static catalogs.

The seed is copied into an empty store on first start. The food catalog and
exercise library are reference data and never enter the mutable store.
"""
from datetime import datetime, timezone
from typing import List

from .schemas import (
    ClientProfile,
    ExerciseDefinition,
    FoodItem,
    FoodLog,
    Habit,
    Macros,
    MeasurementLog,
    User,
    UserRole,
    WeightLog,
    Workout,
    Exercise,
)

COACH_ID = "coach_rushi"

# Weight-trend classification limits, in percent of body weight per day
TREND_THRESHOLDS = {
    "on_track": -0.2,
    "regressing": 0.2,
}


def seed_coach(username: str) -> User:
    return User(
        id=COACH_ID,
        name="Coach Rushi",
        email="rushi@titanfit.com",
        username=username,
        role=UserRole.COACH,
        avatar_url="https://ui-avatars.com/api/?name=Coach+Rushi&background=0D8ABC&color=fff",
    )


def seed_clients() -> List[ClientProfile]:
    return [
        ClientProfile(
            id="c1",
            name="Jane Doe",
            username="janedoe_fit",
            coach_id=COACH_ID,
            passport_code="JD-2024-X9Y",
            dob="1995-05-15",
            age=29,
            occupation="Software Engineer",
            height_cm=168,
            start_weight_kg=70,
            current_weight_kg=66.5,
            goal="Loose 5kg & Build Muscle",
            subscription_end_date="2024-12-31",
            step_goal=8000,
            weekly_step_goal=56000,
            status="active",
            avatar_url="https://ui-avatars.com/api/?name=Jane+Doe&background=0D8ABC&color=fff",
            daily_macro_targets=Macros(calories=2100, protein=140, carbs=220, fats=65, fiber=30),
            meal_plan={
                "breakfast": "100g Oatmeal, 1 scoop Whey Protein",
                "lunch": "200g Chicken Breast (Grilled), 150g White Rice (Cooked)",
                "dinner": "150g Salmon (Raw), 100g Asparagus",
                "snack": "30g Almonds",
            },
            habits=[
                Habit(id="h1", name="Drink 3L Water", frequency="Daily", completed=False),
                Habit(id="h2", name="Sleep 8 Hours", frequency="Daily", completed=True),
                Habit(id="h3", name="Morning Stretching", frequency="Daily", completed=False),
            ],
        ),
        ClientProfile(
            id="c2",
            name="John Smith",
            username="johns_gains",
            coach_id=COACH_ID,
            passport_code="JS-8821-B2A",
            dob="1990-08-20",
            age=33,
            occupation="Architect",
            height_cm=182,
            start_weight_kg=95,
            current_weight_kg=91.2,
            goal="Hypertrophy",
            subscription_end_date="2024-06-15",
            step_goal=10000,
            weekly_step_goal=70000,
            status="flagged",
            avatar_url="https://ui-avatars.com/api/?name=John+Smith&background=EB4D4B&color=fff",
            daily_macro_targets=Macros(calories=2800, protein=200, carbs=300, fats=80, fiber=40),
            habits=[
                Habit(id="h4", name="Creatine Intake", frequency="Daily", completed=False),
            ],
        ),
    ]


def seed_weight_logs() -> List[WeightLog]:
    rows = [
        ("w1", "c1", "2024-05-20", 67.5, "manual", "green"),
        ("w2", "c1", "2024-05-21", 67.2, "manual", "green"),
        ("w3", "c1", "2024-05-22", 67.0, "manual", "green"),
        ("w4", "c1", "2024-05-23", 66.8, "manual", "green"),
        ("w5", "c1", "2024-05-24", 66.5, "photo", "green"),
        ("w6", "c2", "2024-05-22", 90.0, "manual", "green"),
        ("w7", "c2", "2024-05-23", 90.5, "manual", "amber"),
        ("w8", "c2", "2024-05-24", 91.2, "manual", "red"),
    ]
    return [
        WeightLog(id=i, client_id=c, date=d, weight_kg=w, source=s, trend_status=t)
        for i, c, d, w, s, t in rows
    ]


def seed_food_logs() -> List[FoodLog]:
    # Stamped at seeding time so the demo shows food eaten "today"
    now = datetime.now(timezone.utc).isoformat()
    return [
        FoodLog(
            id="f1",
            client_id="c1",
            date=now,
            meal_type="Breakfast",
            food_name="Masala Dosa",
            grams=180,
            macros=Macros(calories=350, protein=8, carbs=65, fats=12, fiber=4),
            is_verified=True,
        ),
        FoodLog(
            id="f2",
            client_id="c1",
            date=now,
            meal_type="Lunch",
            food_name="Chicken Biryani",
            grams=400,
            macros=Macros(calories=600, protein=35, carbs=70, fats=20, fiber=5),
            is_verified=True,
        ),
    ]


def seed_measurements() -> List[MeasurementLog]:
    return [
        MeasurementLog(
            id="m1", client_id="c1", date="2024-05-01",
            chest=95, waist=75, hips=98, arms=30, thighs=55,
            photo_url="https://images.unsplash.com/photo-1571019614242-c5c5dee9f50b?auto=format&fit=crop&w=500&q=80",
        ),
        MeasurementLog(
            id="m2", client_id="c1", date="2024-05-08",
            chest=94.5, waist=74, hips=97.5, arms=30.2, thighs=54.5,
            photo_url="https://images.unsplash.com/photo-1517836357463-d25dfeac3438?auto=format&fit=crop&w=500&q=80",
        ),
        MeasurementLog(
            id="m3", client_id="c1", date="2024-05-15",
            chest=94, waist=72.5, hips=97, arms=30.5, thighs=54,
            photo_url="https://images.unsplash.com/photo-1526506118085-60ce8714f8c5?auto=format&fit=crop&w=500&q=80",
        ),
    ]


def seed_workouts() -> List[Workout]:
    return [
        Workout(
            id="wk1",
            client_id="c1",
            day_of_week="Monday",
            title="Lower Body Power",
            completed=True,
            exercises=[
                Exercise(id="ex1", name="Barbell Squat", sets=4, reps="6-8", completed=True),
                Exercise(id="ex2", name="Romanian Deadlift", sets=3, reps="8-10", completed=True),
                Exercise(id="ex3", name="Leg Extension", sets=3, reps="12-15", completed=True),
            ],
        ),
        Workout(
            id="wk2",
            client_id="c1",
            day_of_week="Tuesday",
            title="Upper Body Push",
            completed=False,
            exercises=[
                Exercise(id="ex4", name="Bench Press", sets=4, reps="6-8", completed=False),
                Exercise(id="ex5", name="Overhead Press", sets=3, reps="8-10", completed=False),
                Exercise(id="ex6", name="Lateral Raises", sets=3, reps="12-15", completed=False),
            ],
        ),
    ]


def _food(id, name, calories, protein, carbs, fats, fiber, image_url) -> FoodItem:
    return FoodItem(
        id=id,
        name=name,
        calories_per_100g=calories,
        protein_per_100g=protein,
        carbs_per_100g=carbs,
        fats_per_100g=fats,
        fiber_per_100g=fiber,
        image_url=image_url,
    )


def _exercise(id, name, muscle_group, gif_url, notes) -> ExerciseDefinition:
    return ExerciseDefinition(id=id, name=name, muscle_group=muscle_group, gif_url=gif_url, notes=notes)


FOOD_DATABASE: List[FoodItem] = [
    _food("p1", "Chicken Breast (Raw)", 110, 23, 0, 1.2, 0, "https://images.unsplash.com/photo-1604503468506-a8da13d82791?auto=format&fit=crop&w=200&q=80"),
    _food("p2", "Chicken Breast (Grilled)", 165, 31, 0, 3.6, 0, "https://images.unsplash.com/photo-1532550907401-a500c9a57435?auto=format&fit=crop&w=200&q=80"),
    _food("p3", "Chicken Thigh (Skinless)", 120, 20, 0, 4, 0, "https://images.unsplash.com/photo-1608797178974-9a8c0827b927?auto=format&fit=crop&w=200&q=80"),
    _food("p4", "Egg (Whole, Large)", 155, 13, 1.1, 11, 0, "https://images.unsplash.com/photo-1506976785307-8732e854ad03?auto=format&fit=crop&w=200&q=80"),
    _food("p5", "Egg Whites (Liquid)", 52, 11, 0.7, 0.2, 0, "https://images.unsplash.com/photo-1498654077810-12c21d4d6dc3?auto=format&fit=crop&w=200&q=80"),
    _food("p6", "Salmon (Raw)", 208, 20, 0, 13, 0, "https://images.unsplash.com/photo-1574781330855-d0db8cc6a79c?auto=format&fit=crop&w=200&q=80"),
    _food("p7", "Tilapia / White Fish", 96, 20, 0, 1.7, 0, "https://images.unsplash.com/photo-1517926126685-618d30e55132?auto=format&fit=crop&w=200&q=80"),
    _food("p8", "Lean Ground Beef (95%)", 137, 21, 0, 5, 0, "https://images.unsplash.com/photo-1588168333986-5078d3ae3976?auto=format&fit=crop&w=200&q=80"),
    _food("p9", "Shrimp / Prawns", 99, 24, 0.2, 0.3, 0, "https://images.unsplash.com/photo-1565680018434-b513d5e5fd47?auto=format&fit=crop&w=200&q=80"),
    _food("p10", "Tuna (Canned in Water)", 116, 26, 0, 1, 0, "https://images.unsplash.com/photo-1599084993091-1cb5c0721cc6?auto=format&fit=crop&w=200&q=80"),
    _food("v1", "Paneer (Raw)", 296, 18, 1.2, 23, 0, "https://upload.wikimedia.org/wikipedia/commons/thumb/e/e6/Paneer_%28Indian_cottage_cheese%29.jpg/240px-Paneer_%28Indian_cottage_cheese%29.jpg"),
    _food("v2", "Tofu (Firm)", 144, 15, 3, 8, 2, "https://images.unsplash.com/photo-1546069901-ba9599a7e63c?auto=format&fit=crop&w=200&q=80"),
    _food("v3", "Soya Chunks", 345, 52, 33, 0.5, 13, "https://upload.wikimedia.org/wikipedia/commons/thumb/d/d3/Soya_Chunks_Curry.jpg/240px-Soya_Chunks_Curry.jpg"),
    _food("v4", "Greek Yogurt (Non-Fat)", 59, 10, 3.6, 0.4, 0, "https://images.unsplash.com/photo-1488477181946-6428a0291777?auto=format&fit=crop&w=200&q=80"),
    _food("v5", "Lentils (Cooked)", 116, 9, 20, 0.4, 8, "https://images.unsplash.com/photo-1547941126-3d5322b218b0?auto=format&fit=crop&w=200&q=80"),
    _food("v6", "Chickpeas (Boiled)", 164, 9, 27, 2.6, 8, "https://images.unsplash.com/photo-1584589167171-541ce45f1eea?auto=format&fit=crop&w=200&q=80"),
    _food("v7", "Edamame", 121, 12, 9, 5, 5, "https://images.unsplash.com/photo-1615485499978-844a4e15643a?auto=format&fit=crop&w=200&q=80"),
    _food("sup1", "Whey Protein Isolate (Scoop)", 370, 90, 1, 1, 0, "https://images.unsplash.com/photo-1579722821273-0f6c7d44362f?auto=format&fit=crop&w=200&q=80"),
    _food("sup2", "Creatine Monohydrate", 0, 0, 0, 0, 0, "https://images.unsplash.com/photo-1593095948071-474c5cc2989d?auto=format&fit=crop&w=200&q=80"),
    _food("sup3", "Casein Protein", 360, 85, 3, 1.5, 0, "https://images.unsplash.com/photo-1593095948071-474c5cc2989d?auto=format&fit=crop&w=200&q=80"),
    _food("sup4", "BCAA Powder", 380, 90, 0, 0, 0, "https://images.unsplash.com/photo-1579722822506-699772c5b3c4?auto=format&fit=crop&w=200&q=80"),
    _food("sup5", "Fish Oil Capsule (1g)", 900, 0, 0, 100, 0, "https://images.unsplash.com/photo-1626078438125-9988712395a1?auto=format&fit=crop&w=200&q=80"),
    _food("ns1", "Almonds", 579, 21, 22, 50, 12.5, "https://images.unsplash.com/photo-1563546056-b09e5306d15a?auto=format&fit=crop&w=200&q=80"),
    _food("ns2", "Walnuts", 654, 15, 14, 65, 7, "https://images.unsplash.com/photo-1574676450692-04ce7148564a?auto=format&fit=crop&w=200&q=80"),
    _food("ns3", "Chia Seeds", 486, 17, 42, 31, 34, "https://images.unsplash.com/photo-1620916566398-39f1143ab7be?auto=format&fit=crop&w=200&q=80"),
    _food("ns4", "Flax Seeds", 534, 18, 29, 42, 27, "https://images.unsplash.com/photo-1616492978583-05b1c518b2c2?auto=format&fit=crop&w=200&q=80"),
    _food("ns5", "Pumpkin Seeds", 559, 30, 10, 49, 6, "https://images.unsplash.com/photo-1605307513364-754f24823d06?auto=format&fit=crop&w=200&q=80"),
    _food("ns6", "Peanut Butter (Natural)", 588, 25, 20, 50, 6, "https://images.unsplash.com/photo-1563729768-6af784667808?auto=format&fit=crop&w=200&q=80"),
    _food("c1", "White Rice (Cooked)", 130, 2.7, 28, 0.3, 0.4, "https://images.unsplash.com/photo-1586201375761-83865001e31c?auto=format&fit=crop&w=200&q=80"),
    _food("c2", "Brown Rice (Cooked)", 112, 2.3, 23, 0.8, 1.8, "https://images.unsplash.com/photo-1596560548464-f010549b84d7?auto=format&fit=crop&w=200&q=80"),
    _food("c3", "Oats / Oatmeal (Raw)", 389, 16.9, 66, 6.9, 10.6, "https://images.unsplash.com/photo-1517673132405-a56a62b18caf?auto=format&fit=crop&w=200&q=80"),
    _food("c4", "Sweet Potato (Boiled)", 86, 1.6, 20, 0.1, 3, "https://images.unsplash.com/photo-1596097635121-14b63b845319?auto=format&fit=crop&w=200&q=80"),
    _food("c5", "Quinoa (Cooked)", 120, 4.4, 21, 1.9, 2.8, "https://images.unsplash.com/photo-1586201375761-83865001e31c?auto=format&fit=crop&w=200&q=80"),
    _food("c6", "Potato (Boiled)", 87, 1.9, 20, 0.1, 1.8, "https://images.unsplash.com/photo-1518977676601-b53f82aba655?auto=format&fit=crop&w=200&q=80"),
    _food("f1", "Avocado", 160, 2, 8.5, 14.7, 6.7, "https://images.unsplash.com/photo-1523049673856-38866f8c6795?auto=format&fit=crop&w=200&q=80"),
    _food("f2", "Olive Oil", 884, 0, 0, 100, 0, "https://images.unsplash.com/photo-1474979266404-7eaacbcd87c5?auto=format&fit=crop&w=200&q=80"),
    _food("f3", "Coconut Oil", 862, 0, 0, 100, 0, "https://images.unsplash.com/photo-1596118337777-622f9801264c?auto=format&fit=crop&w=200&q=80"),
    _food("f4", "Butter", 717, 0.9, 0.1, 81, 0, "https://images.unsplash.com/photo-1589985270826-4b7bb135bc9d?auto=format&fit=crop&w=200&q=80"),
    _food("fv1", "Banana", 89, 1.1, 22.8, 0.3, 2.6, "https://images.unsplash.com/photo-1571771894821-ce9b6c11b08e?auto=format&fit=crop&w=200&q=80"),
    _food("fv2", "Apple", 52, 0.3, 14, 0.2, 2.4, "https://images.unsplash.com/photo-1560806887-1e4cd0b6cbd6?auto=format&fit=crop&w=200&q=80"),
    _food("fv3", "Blueberries", 57, 0.7, 14, 0.3, 2.4, "https://images.unsplash.com/photo-1498557850523-fd3d118b962e?auto=format&fit=crop&w=200&q=80"),
    _food("fv4", "Broccoli (Steamed)", 35, 2.4, 7.2, 0.4, 3.3, "https://images.unsplash.com/photo-1584270354949-c26b0d5b4a0c?auto=format&fit=crop&w=200&q=80"),
    _food("fv5", "Spinach (Raw)", 23, 2.9, 3.6, 0.4, 2.2, "https://images.unsplash.com/photo-1576045057995-568f588f82fb?auto=format&fit=crop&w=200&q=80"),
    _food("ind1", "Roti / Chapati (Whole Wheat)", 297, 10, 56, 3, 9, "https://upload.wikimedia.org/wikipedia/commons/thumb/c/c5/Roti_1.jpg/240px-Roti_1.jpg"),
    _food("ind2", "Dal Tadka (Yellow Lentil)", 115, 6, 14, 4, 5, "https://upload.wikimedia.org/wikipedia/commons/thumb/f/f6/Dal_Tadka.jpg/240px-Dal_Tadka.jpg"),
    _food("ind3", "Chicken Biryani", 170, 12, 22, 6, 1, "https://upload.wikimedia.org/wikipedia/commons/thumb/c/cf/Biryani_of_Lahore.jpg/240px-Biryani_of_Lahore.jpg"),
    _food("ind4", "Paneer Butter Masala", 320, 11, 12, 24, 2, "https://upload.wikimedia.org/wikipedia/commons/thumb/6/6f/Paneer_Butter_Masala.jpg/240px-Paneer_Butter_Masala.jpg"),
    _food("ind5", "Idli", 58, 2, 12, 0.1, 0, "https://upload.wikimedia.org/wikipedia/commons/thumb/1/11/Idli_Sambar.JPG/240px-Idli_Sambar.JPG"),
    _food("ind6", "Dosa (Plain)", 168, 3.9, 29, 3.7, 0.9, "https://upload.wikimedia.org/wikipedia/commons/thumb/9/9f/Dosa_at_Sri_Ganesha_Restauran%2C_Bangkok_%284487048004%29.jpg/240px-Dosa_at_Sri_Ganesha_Restauran%2C_Bangkok_%284487048004%29.jpg"),
    _food("ind7", "Chole (Chickpea Curry)", 130, 7, 20, 3, 6, "https://upload.wikimedia.org/wikipedia/commons/thumb/3/36/Chola_bhatura.jpg/240px-Chola_bhatura.jpg"),
    _food("ind8", "Rajma (Kidney Beans Curry)", 120, 6, 18, 3, 6, "https://upload.wikimedia.org/wikipedia/commons/thumb/d/d4/Rajma.jpg/240px-Rajma.jpg"),
    _food("ind9", "Poha", 180, 3, 35, 3, 1, "https://upload.wikimedia.org/wikipedia/commons/thumb/5/50/Kanda_Poha.jpg/240px-Kanda_Poha.jpg"),
    _food("ind10", "Upma", 190, 4, 30, 6, 2, "https://upload.wikimedia.org/wikipedia/commons/thumb/2/23/Upma%2C_Uppumavu.jpg/240px-Upma%2C_Uppumavu.jpg"),
    _food("ind11", "Moong Dal Chilla", 150, 8, 22, 4, 4, "https://upload.wikimedia.org/wikipedia/commons/thumb/6/6e/Moong_Dal_Chilla.jpg/240px-Moong_Dal_Chilla.jpg"),
    _food("ind12", "Sprouts Salad", 80, 8, 15, 1, 6, "https://upload.wikimedia.org/wikipedia/commons/thumb/5/52/Sprouts_Salad.jpg/240px-Sprouts_Salad.jpg"),
    _food("ind13", "Ragi Roti", 140, 4, 30, 1, 5, "https://upload.wikimedia.org/wikipedia/commons/thumb/c/c5/Ragi_Roti.jpg/240px-Ragi_Roti.jpg"),
    _food("ind14", "Khichdi", 120, 4, 20, 2, 1, "https://upload.wikimedia.org/wikipedia/commons/thumb/1/18/Khichdi_01.jpg/240px-Khichdi_01.jpg"),
    _food("ind15", "Tandoori Chicken", 195, 28, 2, 8, 0, "https://upload.wikimedia.org/wikipedia/commons/thumb/5/53/Tandoori_chicken_laccha_pyaz1_%2836886283595%29.jpg/240px-Tandoori_chicken_laccha_pyaz1_%2836886283595%29.jpg"),
    _food("ind16", "Butter Chicken", 250, 14, 8, 18, 1, "https://upload.wikimedia.org/wikipedia/commons/thumb/3/3c/Chicken_makhani.jpg/240px-Chicken_makhani.jpg"),
    _food("ind17", "Fish Curry", 140, 16, 4, 7, 0, "https://upload.wikimedia.org/wikipedia/commons/thumb/1/14/Fish_Curry.JPG/240px-Fish_Curry.JPG"),
    _food("ind18", "Palak Paneer", 180, 9, 6, 14, 3, "https://upload.wikimedia.org/wikipedia/commons/thumb/a/a6/Palak_Paneer_01.jpg/240px-Palak_Paneer_01.jpg"),
    _food("ind19", "Mutton Biryani", 200, 14, 20, 9, 1, "https://upload.wikimedia.org/wikipedia/commons/thumb/5/5a/Hyderabadi_Dum_Biryani.jpg/240px-Hyderabadi_Dum_Biryani.jpg"),
    _food("ind20", "Samosa", 260, 3, 24, 17, 2, "https://upload.wikimedia.org/wikipedia/commons/thumb/c/cb/Samosachutney.jpg/240px-Samosachutney.jpg"),
    _food("ind21", "Gulab Jamun", 350, 4, 50, 15, 0, "https://upload.wikimedia.org/wikipedia/commons/thumb/8/88/Gulab_Jamun_%281%29.jpg/240px-Gulab_Jamun_%281%29.jpg"),
    _food("ind22", "Lassi (Sweet)", 110, 3, 16, 3, 0, "https://upload.wikimedia.org/wikipedia/commons/thumb/a/a2/Lassi_001.jpg/240px-Lassi_001.jpg"),
    _food("ind23", "Egg Bhurji", 160, 14, 3, 11, 0, "https://upload.wikimedia.org/wikipedia/commons/thumb/6/63/Egg_Bhurji.jpg/240px-Egg_Bhurji.jpg"),
    _food("ind24", "Besan Ladoo", 365, 4, 50, 16, 1, "https://upload.wikimedia.org/wikipedia/commons/thumb/8/8a/Besan_Ladoo.jpg/240px-Besan_Ladoo.jpg"),
    _food("ind25", "Dhokla", 160, 6, 25, 3, 1, "https://upload.wikimedia.org/wikipedia/commons/thumb/6/6f/Khaman_Dhokla.jpg/240px-Khaman_Dhokla.jpg"),
]

EXERCISE_LIBRARY: List[ExerciseDefinition] = [
    _exercise("ex_c1", "Barbell Bench Press", "Chest", "https://media.giphy.com/media/v1.Y2lkPTc5MGI3NjExNnZ6cHR5amN6amN6eHZ6eHZ6eHZ6eHZ6eHZ6eHZ6eA/3o7TKn6e6c4e6c4e6c/giphy.gif", "Keep back arched, feet planted. Lower bar to mid-chest."),
    _exercise("ex_c2", "Incline Dumbbell Press", "Chest", "https://media.giphy.com/media/26AHG5KGFxSkQLBQQ/giphy.gif", "Bench at 30-45 degrees. Press straight up."),
    _exercise("ex_c3", "Cable Flys", "Chest", "https://media.giphy.com/media/l41Yh18f5Tbi9HEzu/giphy.gif", "Slight bend in elbows. Squeeze chest at peak."),
    _exercise("ex_b1", "Pull Ups", "Back", "https://media.giphy.com/media/eM251IxZWv4qL81rTu/giphy.gif", "Full range of motion. Chin over bar."),
    _exercise("ex_b2", "Barbell Row", "Back", "https://media.giphy.com/media/3o7qDEq2bMbcbPRQ2c/giphy.gif", "Keep back straight. Pull to lower ribcage."),
    _exercise("ex_b3", "Lat Pulldown", "Back", "https://media.giphy.com/media/13HgwGsXF0aiGY/giphy.gif", "Wide grip. Pull elbows down and back."),
    _exercise("ex_l1", "Barbell Squat", "Legs", "https://media.giphy.com/media/1iTH1WIUjM0VATSw/giphy.gif", "Knees tracking over toes. Break parallel."),
    _exercise("ex_l2", "Leg Press", "Legs", "https://media.giphy.com/media/3o7TKUM3IgJBX2as9O/giphy.gif", "Do not lock knees at top. Control weight down."),
    _exercise("ex_l3", "Romanian Deadlift", "Legs", "https://media.giphy.com/media/3o7TKM1lP4H15oYlEI/giphy.gif", "Hinge at hips. Keep bar close to shins."),
    _exercise("ex_s1", "Overhead Press", "Shoulders", "https://media.giphy.com/media/3o7TKr3nzbh5WgCFxe/giphy.gif", "Core tight. Press bar vertically."),
    _exercise("ex_s2", "Lateral Raises", "Shoulders", "https://media.giphy.com/media/3o7TKP4tLpQd1X1lV6/giphy.gif", "Lead with elbows. Control the descent."),
    _exercise("ex_a1", "Bicep Curls", "Arms", "https://media.giphy.com/media/3o7TKDkDbIDJieoJsk/giphy.gif", "Keep elbows pinned to sides."),
    _exercise("ex_a2", "Tricep Pushdowns", "Arms", "https://media.giphy.com/media/3o7TKU5C4434l77vC8/giphy.gif", "Full extension at bottom."),
    _exercise("ex_cr1", "Plank", "Core", "https://media.giphy.com/media/xT8qBff8cRRFf7k2u4/giphy.gif", "Keep body in straight line. Squeeze glutes."),
    _exercise("ex_cr2", "Crunches", "Core", "https://media.giphy.com/media/1qfKUnW2ckL7y/giphy.gif", "Lift shoulder blades off floor."),
    _exercise("ex_ca1", "Treadmill Run", "Cardio", "https://media.giphy.com/media/3o7TKn6e6c4e6c4e6c/giphy.gif", "Maintain steady pace."),
    _exercise("ex_ca2", "Cycling", "Cardio", "https://media.giphy.com/media/3o7TKTK9J6yJ9J6yJ9/giphy.gif", "Adjust resistance."),
    _exercise("ex_ca3", "Jump Rope", "Cardio", "https://media.giphy.com/media/3o7TKq8i9X6i9X6i9X/giphy.gif", "Stay on toes. Keep rhythm."),
]

"""Prompt construction for AI meal-plan generation.

The model is asked for a JSON plan keyed by English day names; the persona
and instructions are Turkish, matching the app's audience.
"""

from typing import Dict, List, Optional

from schemas.meal_plan_schema import MealPlanRequest
from services.health_calculator import (
    DEFAULT_ACTIVITY_LEVEL,
    health_calculator,
    normalize_goal,
    profile_value,
    round_half_up,
)

# Share of daily calories per slot; also used by the offline synthesizer.
SLOT_CALORIE_RATIOS = {
    "breakfast": 0.25,
    "lunch": 0.35,
    "dinner": 0.30,
    "snacks": 0.10,
}

GOAL_TEXTS = {
    "weight_loss": "Sağlıklı Kilo Verme",
    "weight_gain": "Sağlıklı Kilo Alma",
    "maintenance": "Kilo Koruma",
    "muscle_gain": "Kas Kazanımı",
}

ACTIVITY_LEVEL_TEXTS = {
    "low": "Düşük (Sedanter yaşam, az hareket)",
    "moderate": "Orta (Haftada 3-4 gün egzersiz)",
    "high": "Yüksek (Günlük egzersiz, aktif yaşam)",
}


def goal_text(goal: Optional[str]) -> str:
    return GOAL_TEXTS[normalize_goal(goal)]


def activity_level_text(level: Optional[str]) -> str:
    return ACTIVITY_LEVEL_TEXTS.get(level or DEFAULT_ACTIVITY_LEVEL, "Orta")


def goal_strategy(goal: Optional[str], daily_calories: int) -> str:
    """Goal-specific guidance paragraph for the user prompt."""
    goal = normalize_goal(goal)
    if goal == "weight_loss":
        return (
            "- Sağlıklı kilo verme (haftada 0.5-1 kg)\n"
            f"- Kalori açığı: {round_half_up(daily_calories * 0.8)} kcal (günlük ihtiyaçtan %20 az)\n"
            "- Yüksek protein oranı kas kaybını önler\n"
            "- Lif açısından zengin besinler tokluk sağlar\n"
            "- Düzenli öğün saatleri metabolizmayı hızlandırır"
        )
    if goal == "weight_gain":
        return (
            "- Sağlıklı kilo alma (haftada 0.5 kg)\n"
            f"- Kalori fazlası: {round_half_up(daily_calories * 1.2)} kcal (günlük ihtiyaçtan %20 fazla)\n"
            "- Kaliteli karbonhidrat ve protein dengesi\n"
            "- Sık öğün (6 öğün) kas kazanımını destekler\n"
            "- Sağlıklı yağlar enerji yoğunluğunu artırır"
        )
    if goal == "muscle_gain":
        return (
            "- Kas kazanımı odaklı beslenme\n"
            f"- Yüksek protein: {round_half_up(daily_calories * 0.30 / 4)}g (günlük)\n"
            "- Antrenman öncesi/sonrası beslenme\n"
            "- Kaliteli karbonhidrat kas glikojenini destekler\n"
            "- Kreatin açısından zengin besinler (et, balık)"
        )
    return (
        "- Mevcut kiloyu koruma\n"
        f"- Dengeli kalori alımı: {daily_calories} kcal\n"
        "- Makro besin dengesi (%25 protein, %45 karb, %30 yağ)\n"
        "- Çeşitli besin gruplarından yararlanma\n"
        "- Sürdürülebilir beslenme alışkanlıkları"
    )


def prompt_energy_targets(request: MealPlanRequest) -> Dict[str, int]:
    """BMR (Harris-Benedict), TDEE and the flat-offset daily target quoted in the prompt."""
    profile = request.user_profile
    bmr = health_calculator.calculate_bmr_harris_benedict(
        profile_value(profile, "weight"),
        profile_value(profile, "height"),
        profile_value(profile, "age"),
        profile_value(profile, "gender"),
    )
    tdee = health_calculator.calculate_tdee(bmr, profile_value(profile, "activity_level"))
    # The quoted daily target offsets BMR, not TDEE; TDEE is shown for context only.
    daily = health_calculator.adjust_calories_for_goal(bmr, request.goal)
    return {"bmr": bmr, "tdee": tdee, "daily_calories": daily}


def _joined(values: Optional[List[str]]) -> str:
    return ", ".join(v for v in (values or []) if v and v.strip())


def build_system_prompt(request: MealPlanRequest) -> str:
    profile = request.user_profile
    allergies = _joined(request.allergies or profile_value(profile, "allergies"))
    restrictions = _joined(request.restrictions)
    preferences = _joined(request.preferences)

    special = []
    if allergies:
        special.append(f"- ALERJİLER: {allergies} - Bu besinleri KESİNLİKLE kullanma!")
    if restrictions:
        special.append(f"- KISITLAMALAR: {restrictions} - Bu besinlerden kaçın")
    if preferences:
        special.append(f"- TERCİHLER: {preferences} - Bu besinleri öncelikle kullan")

    slot_lines = "\n".join([
        f"- Kahvaltı: Günlük kalorinin %{int(SLOT_CALORIE_RATIOS['breakfast'] * 100)}'i, yüksek protein",
        f"- Öğle: Günlük kalorinin %{int(SLOT_CALORIE_RATIOS['lunch'] * 100)}'i, dengeli makrolar",
        f"- Akşam: Günlük kalorinin %{int(SLOT_CALORIE_RATIOS['dinner'] * 100)}'u, hafif ve sindirilebilir",
        f"- Ara öğün: Günlük kalorinin %{int(SLOT_CALORIE_RATIOS['snacks'] * 100)}'u, sağlıklı atıştırmalık",
    ])

    return f"""Sen bir uzman beslenme danışmanısın ve kişiselleştirilmiş meal plan oluşturuyorsun.

GÖREV: Kullanıcının profili ve hedeflerine göre {request.duration} günlük detaylı, uygulanabilir meal plan oluştur.

TEMEL KURALLAR:
1. Türk mutfağını ve yerel malzemeleri tercih et
2. Mevsimsel ve taze ürünleri kullan
3. Kalori ve makro besin değerlerini hassas hesapla
4. Çeşitli ve dengeli öğünler öner
5. Pratik ve uygulanabilir tarifler ver
6. Kullanıcının yaşam tarzına uygun öneriler sun
7. JSON formatında yanıt ver

BESLENME PRENSİPLERİ:
{slot_lines}

ÖZEL DURUMLAR:
{chr(10).join(special) if special else "- Yok"}

JSON YAPISI (ZORUNLU):
{{
  "name": "Plan adı",
  "description": "Plan açıklaması ve faydaları",
  "goal": "{normalize_goal(request.goal)}",
  "duration": {request.duration},
  "daily_calories": 0,
  "daily_protein": 0,
  "daily_carbs": 0,
  "daily_fat": 0,
  "weekly_plan": {{
    "monday": {{
      "breakfast": [{{"id": "unique_id", "name": "Öğün adı", "description": "Detaylı açıklama", "calories": 0, "protein": 0, "carbs": 0, "fat": 0, "ingredients": ["malzeme1"], "instructions": ["adım1"]}}],
      "lunch": [...],
      "dinner": [...],
      "snacks": [...]
    }},
    "tuesday": {{...}}
  }}
}}

Gün anahtarları İngilizce olmalı: monday, tuesday, wednesday, thursday, friday, saturday, sunday.
Her öğün için benzersiz ID, detaylı malzeme listesi ve adım adım talimat ekle.
Toplam günlük değerler hedefle tam uyumlu olsun."""


def build_user_prompt(request: MealPlanRequest) -> str:
    profile = request.user_profile
    targets = prompt_energy_targets(request)
    daily = targets["daily_calories"]
    ratios = health_calculator.get_macro_ratios_for_goal(request.goal)
    gender = "kadın" if profile_value(profile, "gender") == "female" else "erkek"

    prompt = f"""Kişiselleştirilmiş {request.duration} günlük meal plan oluştur:

KULLANICI PROFİLİ:
- Yaş: {profile_value(profile, "age", 25)}
- Cinsiyet: {gender}
- Kilo: {profile_value(profile, "weight", 70)} kg
- Boy: {profile_value(profile, "height", 170)} cm
- Aktivite Seviyesi: {activity_level_text(profile_value(profile, "activity_level"))}
- BMR (Bazal Metabolizma): {targets["bmr"]} kalori
- TDEE (Günlük Enerji Harcaması): {targets["tdee"]} kalori
- Günlük Kalori İhtiyacı: {daily} kalori
- Hedef: {goal_text(request.goal)}

HEDEF DETAYLARI VE STRATEJİ:
{goal_strategy(request.goal, daily)}

BESLENME HEDEFLERİ:
- Günlük Kalori: {daily} kcal"""

    for macro, label, kcal_per_gram in (("protein", "Protein", 4), ("carbs", "Karbonhidrat", 4), ("fat", "Yağ", 9)):
        kcal = daily * ratios[macro]
        prompt += (
            f"\n- {label}: {round_half_up(kcal / kcal_per_gram)}g "
            f"({round_half_up(kcal)} kcal - %{round_half_up(ratios[macro] * 100)})"
        )

    if _joined(request.preferences):
        prompt += f"\n\nBESİN TERCİHLERİ: {_joined(request.preferences)} - Bu besinleri öncelikle kullan ve çeşitlendir"
    if _joined(request.allergies):
        prompt += f"\n\nALERJİLER: {_joined(request.allergies)} - Bu besinleri KESİNLİKLE kullanma ve alternatiflerini öner!"
    if _joined(request.restrictions):
        prompt += f"\n\nDİYET KISITLAMALARI: {_joined(request.restrictions)} - Bu kısıtlamalara uygun alternatifler sun"

    prompt += """

ÖZEL TALİMATLAR:
1. Her öğün için pratik ve uygulanabilir tarifler ver
2. Türk mutfağından örnekler kullan
3. Mevsimsel ve ekonomik malzemeler tercih et
4. Hazırlama süreleri 30 dakikayı geçmesin
5. Her öğün için detaylı malzeme listesi ve adım adım tarif ver
6. Kalori ve makro hesaplamalarını hassas yap
7. Günler arası çeşitlilik sağla
8. Pratik ara öğünler öner

Lütfen yukarıdaki tüm bilgileri dikkate alarak detaylı, uygulanabilir ve kişiselleştirilmiş meal plan oluştur. JSON formatında yanıt ver."""
    return prompt

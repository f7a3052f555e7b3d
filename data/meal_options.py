"""Curated meal options for offline plan generation.

Read-only. Each slot keeps a vegan entry that doubles as the safety-net
choice when filtering removes everything (see `SAFE_OPTION_INDEX`).
"""

BREAKFAST_OPTIONS = [
    {
        "name": "Protein Kahvaltısı",
        "description": "Omlet, avokado, tam tahıl ekmek ve taze meyve ile güne enerjik başlayın",
        "ingredients": ["3 adet yumurta", "1/2 avokado", "2 dilim tam tahıl ekmek", "1 orta boy elma", "1 tsp zeytinyağı"],
        "instructions": ["Yumurtaları çırpın ve omlet yapın", "Avokadoyu ezin ve ekmeğe sürün", "Elmayı dilimleyin", "Sıcak servis yapın"],
        "allergens": ["yumurta", "gluten"],
        "dietary_tags": ["protein", "healthy_fats"],
        "cuisine": "international",
    },
    {
        "name": "Yoğurtlu Kahvaltı",
        "description": "Protein açısından zengin Yunan yoğurdu, granola ve meyvelerle",
        "ingredients": ["200g Yunan yoğurdu", "30g granola", "1 muz", "1 tbsp bal", "10 adet badem"],
        "instructions": ["Yoğurdu kaseye koyun", "Granola ve doğranmış meyveleri ekleyin", "Bal ile tatlandırın", "Bademleri üzerine serpin"],
        "allergens": ["süt", "fındık"],
        "dietary_tags": ["protein", "probiyotik"],
        "cuisine": "mediterranean",
    },
    {
        "name": "Smoothie Bowl",
        "description": "Antioksidan açısından zengin smoothie bowl ile sağlıklı başlangıç",
        "ingredients": ["1 muz", "100g çilek", "200ml badem sütü", "1 tbsp chia tohumu", "30g granola"],
        "instructions": ["Muz ve çileği blender'da karıştırın", "Badem sütü ekleyip smoothie yapın", "Kaseye dökün", "Chia tohumu ve granola ile süsleyin"],
        "allergens": ["fındık"],
        "dietary_tags": ["vegan", "antioxidant", "fiber"],
        "cuisine": "modern",
    },
    {
        "name": "Menemen",
        "description": "Geleneksel Türk kahvaltısı - domates, biber ve yumurta",
        "ingredients": ["3 adet yumurta", "2 domates", "1 yeşil biber", "1 soğan", "2 tbsp zeytinyağı", "Baharat"],
        "instructions": ["Sebzeleri doğrayın ve kavurun", "Yumurtaları ekleyin", "Karıştırarak pişirin", "Sıcak servis yapın"],
        "allergens": ["yumurta"],
        "dietary_tags": ["protein", "traditional"],
        "cuisine": "turkish",
    },
    {
        "name": "Vegan Protein Bowl",
        "description": "Bitki bazlı protein kaynakları ile besleyici kahvaltı",
        "ingredients": ["50g kinoa", "30g chia tohumu", "200ml hindistan cevizi sütü", "1 muz", "20g protein tozu"],
        "instructions": ["Kinoayı haşlayın", "Chia tohumu ile karıştırın", "Hindistan cevizi sütü ekleyin", "Protein tozu ile zenginleştirin"],
        "allergens": [],
        "dietary_tags": ["vegan", "protein", "gluten_free"],
        "cuisine": "modern",
    },
]

LUNCH_OPTIONS = [
    {
        "name": "Akdeniz Salatası",
        "description": "Izgara tavuk, kinoa ve taze sebzelerle doyurucu öğle yemeği",
        "ingredients": ["150g tavuk göğsü", "80g kinoa", "100g karışık yeşillik", "50g cherry domates", "30g feta peyniri", "2 tbsp zeytinyağı"],
        "instructions": ["Tavuğu baharatla marine edin ve ızgarada pişirin", "Kinoayı haşlayın", "Sebzeleri doğrayın", "Tüm malzemeleri karıştırın ve servis yapın"],
        "allergens": ["süt"],
        "dietary_tags": ["protein", "healthy_fats", "gluten_free"],
        "cuisine": "mediterranean",
    },
    {
        "name": "Somon Bowl",
        "description": "Omega-3 açısından zengin somon ile besleyici bowl",
        "ingredients": ["150g somon fileto", "100g esmer pirinç", "1/2 avokado", "50g edamame", "1 tbsp susam", "Soya sosu"],
        "instructions": ["Somonu fırında pişirin", "Pirinci haşlayın", "Avokadoyu dilimleyin", "Bowl'a yerleştirin ve susam ile süsleyin"],
        "allergens": ["balık", "soya"],
        "dietary_tags": ["omega3", "protein", "healthy_fats"],
        "cuisine": "asian",
    },
    {
        "name": "Türk Usulü Köfte",
        "description": "Ev yapımı köfte, bulgur pilavı ve cacık ile geleneksel lezzet",
        "ingredients": ["150g dana kıyma", "80g bulgur", "200g yoğurt", "1 salatalık", "Maydanoz", "Baharat"],
        "instructions": ["Köfteleri yoğurun ve pişirin", "Bulgur pilavı yapın", "Cacık hazırlayın", "Sıcak servis yapın"],
        "allergens": ["süt"],
        "dietary_tags": ["protein", "traditional", "fiber"],
        "cuisine": "turkish",
    },
    {
        "name": "Vegan Buddha Bowl",
        "description": "Çeşitli sebzeler, tahıllar ve baklagillerle besleyici vegan öğün",
        "ingredients": ["100g kinoa", "100g nohut", "50g ıspanak", "1/2 avokado", "50g havuç", "2 tbsp tahin"],
        "instructions": ["Kinoayı haşlayın", "Nohutları marine edin ve fırınlayın", "Sebzeleri hazırlayın", "Tahin sosu ile servis yapın"],
        "allergens": ["susam"],
        "dietary_tags": ["vegan", "protein", "fiber", "gluten_free"],
        "cuisine": "modern",
    },
    {
        "name": "Balık Izgara",
        "description": "Taze deniz ürünleri ile hafif ve besleyici öğle yemeği",
        "ingredients": ["150g levrek", "100g bulgur pilavı", "100g ızgara sebze", "2 tbsp zeytinyağı", "Limon"],
        "instructions": ["Balığı marine edin", "Izgarada pişirin", "Bulgur pilavı hazırlayın", "Sebzeleri ızgarada pişirin"],
        "allergens": ["balık"],
        "dietary_tags": ["protein", "omega3", "low_fat"],
        "cuisine": "mediterranean",
    },
]

DINNER_OPTIONS = [
    {
        "name": "Fırın Balığı",
        "description": "Sebzeli fırın balığı ile hafif ve besleyici akşam yemeği",
        "ingredients": ["150g levrek fileto", "200g karışık sebze", "100g tatlı patates", "2 tbsp zeytinyağı", "Limon", "Taze otlar"],
        "instructions": ["Balığı marine edin", "Sebzeleri doğrayın", "Fırın tepsisine yerleştirin", "200°C'de 25 dakika pişirin"],
        "allergens": ["balık"],
        "dietary_tags": ["protein", "omega3", "low_calorie"],
        "cuisine": "mediterranean",
    },
    {
        "name": "Tavuk Sote",
        "description": "Sebzeli tavuk sote ile protein açısından zengin akşam",
        "ingredients": ["150g tavuk göğsü", "100g brokoli", "50g mantar", "1 kırmızı biber", "2 tbsp zeytinyağı", "Baharat"],
        "instructions": ["Tavuğu küp küp doğrayın", "Sebzeleri hazırlayın", "Tavada sote edin", "Baharatlarla tatlandırın"],
        "allergens": [],
        "dietary_tags": ["protein", "low_carb", "vegetables"],
        "cuisine": "international",
    },
    {
        "name": "Mercimek Köftesi",
        "description": "Protein açısından zengin vejetaryen seçenek",
        "ingredients": ["150g kırmızı mercimek", "50g bulgur", "1 soğan", "Maydanoz", "Baharat", "Yeşillik"],
        "instructions": ["Mercimeği haşlayın", "Bulgurla karıştırın", "Köfte şekli verin", "Yeşillikle servis yapın"],
        "allergens": [],
        "dietary_tags": ["vegan", "protein", "fiber", "traditional"],
        "cuisine": "turkish",
    },
    {
        "name": "Izgara Et",
        "description": "Protein ihtiyacını karşılayan ızgara et ile doyurucu akşam",
        "ingredients": ["150g dana bonfile", "100g ızgara sebze", "80g kinoa", "2 tbsp zeytinyağı", "Baharat"],
        "instructions": ["Eti marine edin", "Izgarada pişirin", "Sebzeleri ızgarada hazırlayın", "Kinoa ile servis yapın"],
        "allergens": [],
        "dietary_tags": ["protein", "iron", "gluten_free"],
        "cuisine": "international",
    },
    {
        "name": "Vegan Curry",
        "description": "Hindistan cevizi sütlü sebze curry ile egzotik lezzet",
        "ingredients": ["200ml hindistan cevizi sütü", "100g nohut", "100g ıspanak", "1 patlıcan", "Curry baharat", "80g esmer pirinç"],
        "instructions": ["Sebzeleri doğrayın", "Curry baharatı ile kavurun", "Hindistan cevizi sütü ekleyin", "Pirinç ile servis yapın"],
        "allergens": [],
        "dietary_tags": ["vegan", "protein", "spicy", "fiber"],
        "cuisine": "indian",
    },
]

SNACK_OPTIONS = [
    {
        "name": "Protein Smoothie",
        "description": "Antrenman sonrası ideal protein smoothie",
        "ingredients": ["1 muz", "200ml süt", "1 tbsp fıstık ezmesi", "1 tsp bal"],
        "instructions": ["Tüm malzemeleri blender'a koyun", "1 dakika karıştırın", "Soğuk servis yapın"],
        "allergens": ["süt", "fındık"],
        "dietary_tags": ["protein", "post_workout"],
        "cuisine": "modern",
    },
    {
        "name": "Kuruyemiş Karışımı",
        "description": "Sağlıklı yağlar ve protein açısından zengin atıştırmalık",
        "ingredients": ["15 adet badem", "10 adet ceviz", "5 adet hurma", "1 tbsp chia tohumu"],
        "instructions": ["Kuruyemişleri karıştırın", "Hurmaları doğrayın", "Chia tohumu ekleyin", "Porsiyonlayın"],
        "allergens": ["fındık"],
        "dietary_tags": ["healthy_fats", "protein", "energy"],
        "cuisine": "international",
    },
    {
        "name": "Yoğurt Parfesi",
        "description": "Probiyotik açısından zengin sağlıklı tatlı",
        "ingredients": ["150g Yunan yoğurdu", "50g meyve", "20g granola", "1 tsp bal"],
        "instructions": ["Yoğurdu kaseye koyun", "Meyveleri ekleyin", "Granola ile süsleyin", "Bal ile tatlandırın"],
        "allergens": ["süt"],
        "dietary_tags": ["protein", "probiyotik", "antioxidant"],
        "cuisine": "modern",
    },
    {
        "name": "Hummus ve Sebze",
        "description": "Protein açısından zengin humus ile taze sebzeler",
        "ingredients": ["100g humus", "1 havuç", "1 salatalık", "5 adet cherry domates", "Tam tahıl kraker"],
        "instructions": ["Sebzeleri dilimleyin", "Humusu kaseye koyun", "Sebzelerle birlikte servis yapın"],
        "allergens": ["susam"],
        "dietary_tags": ["vegan", "protein", "fiber", "vegetables"],
        "cuisine": "mediterranean",
    },
    {
        "name": "Vegan Energy Ball",
        "description": "Doğal şekerler ve protein ile enerji topu",
        "ingredients": ["10 adet hurma", "30g badem", "1 tbsp chia tohumu", "1 tbsp kakao tozu"],
        "instructions": ["Hurmaları ezin", "Bademleri parçalayın", "Tüm malzemeleri karıştırın", "Top şekli verin"],
        "allergens": ["fındık"],
        "dietary_tags": ["vegan", "energy", "natural_sugar", "protein"],
        "cuisine": "modern",
    },
]

MEAL_OPTIONS = {
    "breakfast": BREAKFAST_OPTIONS,
    "lunch": LUNCH_OPTIONS,
    "dinner": DINNER_OPTIONS,
    "snacks": SNACK_OPTIONS,
}

# Vegan entry per slot used when filtering leaves nothing.
SAFE_OPTION_INDEX = {
    "breakfast": 4,
    "lunch": 3,
    "dinner": 2,
    "snacks": 4,
}

"""English provider vocabulary rendered as Korean display text.

Pairs are applied in this exact order as case-insensitive substring
replacements. Shorter keys listed before longer keys that contain them
(e.g. "Pork" before "Pork Products") win, leaving a partially translated
phrase such as "돼지고기 Products". Reordering changes rendered output.
"""

DISPLAY_TERMS = (
    ("Protein", "단백질"),
    ("Total lipid (fat)", "지방"),
    ("Carbohydrate, by difference", "탄수화물"),
    ("Energy", "열량(에너지)"),
    ("Sugars, total including NLEA", "당류"),
    ("Sodium, Na", "나트륨"),
    ("Cholesterol", "콜레스테롤"),
    ("Fatty acids, total saturated", "포화지방"),
    ("Fatty acids, total trans", "트랜스지방"),
    ("Apple", "사과"),
    ("Beef", "소고기"),
    ("Fruits and Fruit Juices", "과일 및 과일주스류"),
    ("Beef Products", "소고기 가공품"),
    ("Pork", "돼지고기"),
    ("Pork Products", "돼지고기 가공품"),
    ("Strawberry", "딸기"),
    ("Strawberries", "딸기"),
    ("Chicken", "닭고기"),
    ("Poultry Products", "가금류 가공품"),
    ("Pepper", "후추"),
    ("Basil", "바질"),
    ("Cinnamon", "시나몬(계피)"),
    ("Spices and Herbs", "향신료 및 허브"),
    ("Aspartame", "아스파탐"),
    ("Saccharin", "사카린"),
    ("raw", "생물(Raw)"),
    ("Meat", "육류"),
    ("Wheat flour", "밀가루"),
    ("White, all-purpose", "다목적(중력분) 백밀가루"),
    ("Bread", "제빵용(강력분)"),
    ("Cake", "제과용(박력분)"),
    ("Enriched", "영양 강화"),
    ("Unenriched", "영양 무강화"),
    ("Bleached", "표백"),
    ("Unbleached", "무표백"),
    ("Fruits", "과일류"),
    ("General", "일반"),
    ("Food Additives", "식품첨가물"),
)

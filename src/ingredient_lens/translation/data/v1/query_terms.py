"""Source-language ingredient names mapped to English search terms.

Keys are stored already stripped and lowercased.
"""

QUERY_TERMS = {
    # produce
    "사과": "apple", "りんご": "apple", "リンゴ": "apple",
    "딸기": "strawberry", "いちご": "strawberry", "イチゴ": "strawberry",
    "포도": "grape", "ぶどう": "grape", "ブドウ": "grape",
    "토마토": "tomato", "トマト": "tomato",
    "마늘": "garlic", "にんにく": "garlic", "ニンニク": "garlic",
    "배": "pear", "梨": "pear",
    "복숭아": "peach", "桃": "peach",
    "바나나": "banana", "バナナ": "banana",
    "오렌지": "orange", "オレンジ": "orange",
    "귤": "mandarin", "みかん": "mandarin",
    "수박": "watermelon", "スイカ": "watermelon",
    "멜론": "melon", "メロン": "melon",
    "감": "persimmon", "柿": "persimmon",
    "블루베리": "blueberry", "ブルーベリー": "blueberry",
    "키위": "kiwi", "キウイ": "kiwi",
    "레몬": "lemon", "レモン": "lemon",
    "배추": "napa cabbage", "白菜": "napa cabbage",
    "양배추": "cabbage", "キャベツ": "cabbage",
    "양파": "onion", "玉ねぎ": "onion", "たまねぎ": "onion",
    "감자": "potato", "じゃがいも": "potato",
    "고구마": "sweet potato", "さつまいも": "sweet potato",
    "당근": "carrot", "にんじん": "carrot",
    "시금치": "spinach", "ほうれん草": "spinach",
    "상추": "lettuce", "レタス": "lettuce",
    "오이": "cucumber", "きゅうり": "cucumber",
    "호박": "pumpkin", "かぼちゃ": "pumpkin",
    "무": "radish", "大根": "radish",
    "파": "green onion", "ねぎ": "green onion",
    "브로콜리": "broccoli", "ブロッコリー": "broccoli",
    "버섯": "mushroom", "きのこ": "mushroom",
    "가지": "eggplant", "なす": "eggplant",
    "고추": "chili pepper", "피망": "bell pepper", "ピーマン": "bell pepper",
    # livestock
    "소고기": "beef", "쇠고기": "beef", "牛肉": "beef",
    "돼지고기": "pork", "豚肉": "pork",
    "닭고기": "chicken", "鶏肉": "chicken",
    "오리고기": "duck",
    "양고기": "lamb", "羊肉": "lamb",
    "달걀": "egg", "계란": "egg", "卵": "egg", "たまご": "egg",
    "우유": "milk", "牛乳": "milk",
    "치즈": "cheese", "チーズ": "cheese",
    "버터": "butter", "バター": "butter",
    "요거트": "yogurt", "요구르트": "yogurt", "ヨーグルト": "yogurt",
    "햄": "ham", "ハム": "ham",
    "소시지": "sausage", "ソーセージ": "sausage",
    "베이컨": "bacon", "ベーコン": "bacon",
    # seafood
    "연어": "salmon", "鮭": "salmon", "サーモン": "salmon",
    "참치": "tuna", "マグロ": "tuna",
    "고등어": "mackerel", "サバ": "mackerel",
    "새우": "shrimp", "エビ": "shrimp",
    "오징어": "squid", "イカ": "squid",
    "문어": "octopus", "タコ": "octopus",
    "굴": "oyster", "牡蠣": "oyster",
    "조개": "clam", "アサリ": "clam",
    "게": "crab", "カニ": "crab",
    "멸치": "anchovy",
    "김": "laver", "海苔": "laver",
    "미역": "seaweed", "わかめ": "seaweed",
    "전복": "abalone", "アワビ": "abalone",
    "명태": "pollock",
    # grains and processed staples
    "밀가루": "wheat flour", "小麦粉": "wheat flour",
    "강력분": "bread flour", "強力粉": "bread flour",
    "중력분": "all-purpose flour",
    "박력분": "cake flour", "薄力粉": "cake flour",
    "쌀": "rice", "米": "rice",
    "현미": "brown rice", "玄米": "brown rice",
    "보리": "barley", "大麦": "barley",
    "귀리": "oats", "オーツ麦": "oats",
    "옥수수": "corn", "とうもろこし": "corn",
    "메밀": "buckwheat", "そば粉": "buckwheat",
    "빵": "bread", "パン": "bread",
    "국수": "noodles", "うどん": "noodles",
    "두부": "tofu", "豆腐": "tofu",
    "대두": "soybean", "콩": "soybean", "大豆": "soybean",
    # food additives
    "아스파탐": "aspartame", "アスパルテーム": "aspartame",
    "사카린": "saccharin", "サッカリン": "saccharin",
    "수크랄로스": "sucralose", "スクラロース": "sucralose",
    "스테비아": "stevia", "ステビア": "stevia",
    "아질산나트륨": "sodium nitrite", "亜硝酸ナトリウム": "sodium nitrite",
    "안식향산나트륨": "sodium benzoate",
    "소르빈산칼륨": "potassium sorbate",
    "글루탐산나트륨": "monosodium glutamate", "msg": "monosodium glutamate",
    "카라기난": "carrageenan",
    "식품첨가물": "food additives", "食品添加物": "food additives",
    # spices
    "후추": "pepper", "胡椒": "pepper", "こしょう": "pepper",
    "바질": "basil", "バジル": "basil",
    "시나몬": "cinnamon", "계피": "cinnamon", "シナモン": "cinnamon",
    "고춧가루": "red pepper powder",
    "강황": "turmeric", "ターメリック": "turmeric",
    "생강": "ginger", "生姜": "ginger", "しょうが": "ginger",
    "정향": "clove",
    "육두구": "nutmeg", "ナツメグ": "nutmeg",
    "커민": "cumin",
    "로즈마리": "rosemary", "ローズマリー": "rosemary",
    "와사비": "wasabi", "わさび": "wasabi",
    "산초": "sansho", "山椒": "sansho",
    "향신료": "spices", "香辛料": "spices",
    # medicinal herbs
    "인삼": "ginseng", "高麗人参": "ginseng", "朝鮮人参": "ginseng",
    "홍삼": "red ginseng",
    "감초": "licorice", "甘草": "licorice",
    "대추": "jujube", "なつめ": "jujube",
    "당귀": "angelica root",
    "황기": "astragalus",
    "오미자": "schisandra",
    "구기자": "goji berry", "クコの実": "goji berry",
    "쑥": "mugwort",
    "결명자": "cassia seed",
    "갈근": "kudzu root", "葛根": "kudzu root",
    "복령": "poria",
}

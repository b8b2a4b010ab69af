"""Static option catalog for the Prompt Builder.

Labels carry the Traditional Chinese term first and an optional English gloss
in parentheses; values are the canonical English prompt terms.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .registry import CategorySpec, OptionRecord


def _options(rows: Sequence[Tuple]) -> Tuple[OptionRecord, ...]:
    records = []
    for row in rows:
        label, value = row[0], row[1]
        gender: Optional[str] = row[2] if len(row) > 2 else None
        image: Optional[str] = row[3] if len(row) > 3 else None
        records.append(OptionRecord(value=value, label=label, gender=gender, image=image))
    return tuple(records)


def _placeholder(color: str, text: str, fg: str = "ffffff") -> str:
    return f"https://placehold.co/600x400/{color}/{fg}?text={text}"


NATIONALITIES = _options(
    [
        ("台灣 (Taiwan)", "Taiwanese"),
        ("日本 (Japan)", "Japanese"),
        ("韓國 (Korea)", "Korean"),
        ("中國 (China)", "Chinese"),
        ("美國 (USA)", "American"),
        ("英國 (UK)", "British"),
        ("法國 (France)", "French"),
        ("俄羅斯 (Russia)", "Russian"),
        ("德國 (Germany)", "German"),
        ("巴西 (Brazil)", "Brazilian"),
    ]
)

ANIMAL_SPECIES = _options(
    [
        ("貓 (Cat)", "cat"),
        ("狗 (Dog)", "dog"),
        ("獅子 (Lion)", "lion"),
        ("老虎 (Tiger)", "tiger"),
        ("鷹 (Eagle)", "eagle"),
        ("龍 (Dragon)", "dragon"),
        ("狼 (Wolf)", "wolf"),
        ("狐狸 (Fox)", "fox"),
        ("熊 (Bear)", "bear"),
        ("兔子 (Rabbit)", "rabbit"),
    ]
)

ANIMAL_FUR = _options(
    [
        ("白色 (White)", "white fur"),
        ("黑色 (Black)", "black fur"),
        ("橘色 (Orange)", "orange fur"),
        ("三花 (Calico)", "calico fur"),
        ("虎斑 (Tabby)", "tabby fur"),
        ("金色 (Golden)", "golden fur"),
        ("蓬鬆 (Fluffy)", "fluffy fur"),
        ("鱗片 (Scales)", "scales"),
        ("羽毛 (Feathers)", "feathers"),
    ]
)

VEHICLE_TYPES = _options(
    [
        ("跑車 (Sports Car)", "sports car"),
        ("轎車 (Sedan)", "sedan"),
        ("休旅車 (SUV)", "SUV"),
        ("卡車 (Truck)", "truck"),
        ("重機 (Motorcycle)", "motorcycle"),
        ("賽車 (Race Car)", "race car"),
        ("太空船 (Spaceship)", "spaceship"),
        ("飛機 (Airplane)", "airplane"),
        ("直升機 (Helicopter)", "helicopter"),
        ("機甲 (Mecha)", "mecha robot"),
    ]
)

VEHICLE_COLOR = _options(
    [
        ("金屬紅 (Metallic Red)", "metallic red paint"),
        ("消光黑 (Matte Black)", "matte black finish"),
        ("珍珠白 (Pearl White)", "pearl white paint"),
        ("賽車銀 (Silver)", "silver metallic"),
        ("賽博龐克藍 (Cyber Blue)", "cyberpunk blue neon"),
        ("黃色 (Yellow)", "bright yellow"),
        ("軍綠 (Army Green)", "military green"),
        ("生鏽 (Rusted)", "rusted metal texture"),
    ]
)

CHART_TYPES = _options(
    [
        ("長條圖 (Bar Chart)", "bar chart"),
        ("折線圖 (Line Chart)", "line chart"),
        ("圓餅圖 (Pie Chart)", "pie chart"),
        ("流程圖 (Flowchart)", "flowchart"),
        ("時間軸 (Timeline)", "timeline"),
        ("心智圖 (Mind Map)", "mind map"),
        ("比較表 (Comparison Table)", "comparison table"),
        ("地圖 (Map)", "illustrated map"),
    ]
)

INFOGRAPHIC_STYLES = _options(
    [
        ("扁平設計 (Flat)", "flat design"),
        ("極簡 (Minimalist)", "minimalist"),
        ("等角 3D (Isometric)", "isometric 3D"),
        ("手繪 (Hand-drawn)", "hand-drawn"),
        ("企業簡報 (Corporate)", "corporate presentation style"),
        ("復古海報 (Retro Poster)", "retro poster style"),
    ]
)

PROMPT_CATEGORIES: List[CategorySpec] = [
    # --- ANIMAL SPECIFIC ---
    CategorySpec(id="animal_species", label="物種 (Species)", scope="subject", options=ANIMAL_SPECIES, description="動物種類"),
    CategorySpec(
        id="animal_fur",
        label="毛色/特徵 (Fur)",
        scope="subject",
        multi_select=True,
        options=ANIMAL_FUR,
        description="動物的毛色與質感",
    ),
    # --- VEHICLE SPECIFIC ---
    CategorySpec(id="vehicle_type", label="車型 (Vehicle Type)", scope="subject", options=VEHICLE_TYPES, description="交通工具種類"),
    CategorySpec(id="vehicle_color", label="烤漆顏色 (Paint)", scope="subject", options=VEHICLE_COLOR, description="車輛外觀顏色"),
    # --- INFOGRAPHIC SPECIFIC ---
    CategorySpec(id="chart_type", label="圖表類型 (Chart Type)", scope="subject", options=CHART_TYPES, description="資訊圖表的形式"),
    CategorySpec(
        id="infographic_style",
        label="圖表風格 (Infographic Style)",
        scope="subject",
        options=INFOGRAPHIC_STYLES,
        description="資訊圖表的視覺風格",
    ),
    # --- HUMAN ---
    CategorySpec(
        id="nationality",
        label="國籍/人種 (Nationality)",
        scope="subject",
        multi_select=True,
        options=NATIONALITIES,
        description="人物的國籍或種族特徵",
    ),
    CategorySpec(
        id="age",
        label="年齡 (Age)",
        scope="subject",
        multi_select=True,
        description="人物的年齡層",
        options=_options(
            [
                ("嬰兒 (Baby)", "baby"),
                ("兒童 (Child)", "child"),
                ("青少年 (Teenager)", "teenager"),
                ("20歲 (20s)", "20 years old"),
                ("30歲 (30s)", "30 years old"),
                ("中年 (Middle-aged)", "middle-aged"),
                ("老年 (Elderly)", "elderly"),
            ]
        ),
    ),
    CategorySpec(
        id="body_type",
        label="體型 (Body Type)",
        scope="subject",
        multi_select=True,
        description="人物的身材輪廓 (可多選)",
        options=_options(
            [
                ("健美/肌肉 (Athletic)", "athletic body, muscular"),
                ("豐滿/曲線 (Curvy)", "curvy body, voluptuous", "female"),
                ("纖細/瘦長 (Slender)", "slender body, skinny"),
                ("微胖 (Chubby)", "chubby body, plus size"),
                ("寬肩 (Broad shoulders)", "broad shoulders", "male"),
                ("嬌小 (Petite)", "petite frame", "female"),
                ("高大 (Tall)", "tall stature"),
            ]
        ),
    ),
    CategorySpec(
        id="role",
        label="角色/職業 (Role)",
        scope="subject",
        multi_select=True,
        description="人物的身份或職業",
        options=_options(
            [
                ("大學生", "university student"),
                ("上班族", "office worker"),
                ("時尚模特兒", "fashion model"),
                ("偶像歌手", "pop idol"),
                ("醫生", "doctor"),
                ("運動員", "athlete"),
                ("戰士", "warrior"),
                ("賽博格 (生化人)", "cyborg"),
                ("巫師/法師", "wizard"),
                ("精靈", "elf"),
                ("探險家", "explorer"),
                ("街頭龐克", "street punk"),
            ]
        ),
    ),
    CategorySpec(
        id="face_shape",
        label="臉型 (Face Shape)",
        scope="subject",
        multi_select=True,
        description="臉部輪廓特徵",
        options=_options(
            [
                ("鵝蛋臉", "oval face"),
                ("圓臉", "round face"),
                ("瓜子臉 (心形)", "heart-shaped face"),
                ("方臉", "square face"),
                ("稜角分明", "chiseled jawline"),
                ("瘦削臉頰", "gaunt cheeks"),
                ("嬰兒肥", "chubby cheeks"),
            ]
        ),
    ),
    CategorySpec(
        id="eye_gaze",
        label="視線與眼神 (Gaze)",
        scope="subject",
        multi_select=True,
        description="眼睛的方向與互動",
        options=_options(
            [
                ("直視鏡頭", "looking at viewer"),
                ("看向遠方", "looking away, looking at horizon"),
                ("閉眼", "closed eyes"),
                ("眨眼", "winking"),
                ("翻白眼", "rolling eyes"),
                ("向下看", "looking down"),
                ("向上看", "looking up"),
                ("斜視", "sideways glance"),
            ]
        ),
    ),
    CategorySpec(
        id="hair_color",
        label="髮色 (Hair Color)",
        scope="subject",
        multi_select=True,
        description="頭髮的顏色 (可多選混搭)",
        options=_options(
            [
                ("黑色", "black hair"),
                ("金色 (Blonde)", "blonde hair"),
                ("棕色 (Brown)", "brown hair"),
                ("紅色 (Red)", "red hair"),
                ("粉紅色 (Pink)", "pink hair"),
                ("銀白色 (Silver)", "silver white hair"),
                ("藍色 (Blue)", "blue hair"),
                ("紫色 (Purple)", "purple hair"),
                ("彩虹色", "rainbow hair"),
                ("漸層染 (Ombre)", "ombre hair"),
                ("挑染 (Streaks)", "highlighted hair"),
            ]
        ),
    ),
    CategorySpec(
        id="hair_style",
        label="髮型 (Hair Style)",
        scope="subject",
        multi_select=True,
        description="頭髮的造型 (可多選)",
        options=_options(
            [
                ("長直髮", "long straight hair"),
                ("波浪捲髮", "wavy curly hair"),
                ("鮑伯頭 (Bob)", "short bob cut"),
                ("平頭 (Buzz)", "buzz cut"),
                ("馬尾", "high ponytail"),
                ("雙馬尾", "twin tails"),
                ("姬髮式", "hime cut"),
                ("俐落短髮", "short pixie cut"),
                ("凌亂短髮", "messy short hair"),
                ("油頭", "slicked back hair"),
                ("光頭", "bald head"),
                ("爆炸頭 (Afro)", "afro hair"),
                ("辮子 (Braids)", "braided hair"),
                ("丸子頭 (Bun)", "hair bun"),
            ]
        ),
    ),
    CategorySpec(
        id="appearance",
        label="外觀細節 (Features)",
        scope="subject",
        multi_select=True,
        description="皮膚、眼睛與其他特徵 (可多選)",
        options=_options(
            [
                ("白皙皮膚", "pale skin"),
                ("小麥色皮膚", "tanned skin"),
                ("深色皮膚", "dark skin"),
                ("藍眼睛", "blue eyes"),
                ("琥珀色眼睛", "amber eyes"),
                ("異色瞳", "heterochromia eyes"),
                ("雀斑", "freckles"),
                ("淚痣", "mole under eye"),
                ("紋身", "tattoos"),
                ("疤痕", "scars"),
                ("精緻妝容", "exquisite makeup", "female"),
                ("素顏/自然", "natural skin, no makeup", "female"),
                ("紅唇", "red lips", "female"),
                ("長睫毛", "long eyelashes", "female"),
                ("煙燻妝", "smokey eyes", "female"),
                ("刮鬍乾淨", "clean shaven", "male"),
                ("絡腮鬍", "full beard", "male"),
                ("山羊鬍", "goatee", "male"),
                ("鬍渣", "stubble", "male"),
                ("銳利眼神", "sharp eyes", "male"),
            ]
        ),
    ),
    CategorySpec(
        id="clothing",
        label="服裝 (Clothing)",
        scope="subject",
        multi_select=True,
        description="穿著風格 (可多選混搭)",
        options=_options(
            [
                ("白襯衫", "white button-up shirt"),
                ("寬鬆帽T", "oversized hoodie"),
                ("休閒 T-shirt", "casual t-shirt"),
                ("訂製西裝", "tailored suit"),
                ("晚禮服", "elegant evening gown", "female"),
                ("夏季洋裝", "summer floral dress", "female"),
                ("露肩上衣", "off-shoulder top", "female"),
                ("旗袍", "cheongsam", "female"),
                ("燕尾服", "tuxedo", "male"),
                ("水手服", "sailor school uniform"),
                ("和服", "traditional kimono"),
                ("皮夾克", "leather jacket"),
                ("戰術背心", "tactical vest"),
                ("科幻機甲", "sci-fi mechanical armor"),
                ("運動服", "sportswear"),
            ]
        ),
    ),
    CategorySpec(
        id="clothing_detail",
        label="服裝材質 (Texture)",
        scope="subject",
        multi_select=True,
        description="衣物的布料與質感 (可多選)",
        options=_options(
            [
                ("緊身衣物", "tight fitting clothes"),
                ("絲綢/緞面", "silk satin fabric"),
                ("丹寧/牛仔", "denim texture"),
                ("皮革", "leather material"),
                ("針織/羊毛", "knitted wool texture"),
                ("蕾絲細節", "intricate lace details", "female"),
                ("濕透", "wet clothes, soaked"),
                ("金屬光澤", "metallic fabric"),
                ("破舊", "worn and torn clothes"),
            ]
        ),
    ),
    CategorySpec(
        id="accessories",
        label="飾品與配件 (Accessories)",
        scope="subject",
        multi_select=True,
        description="增加人物豐富度 (可多選)",
        options=_options(
            [
                ("金屬框眼鏡", "wearing metal rim glasses"),
                ("墨鏡", "wearing sunglasses"),
                ("棒球帽", "wearing baseball cap"),
                ("貝雷帽", "wearing beret"),
                ("全罩耳機", "wearing headphones"),
                ("耳環", "wearing earrings"),
                ("珍珠項鍊", "wearing pearl necklace"),
                ("圍巾", "wearing scarf"),
                ("戰術面罩", "wearing tactical mask"),
                ("皇冠", "wearing crown"),
                ("眼罩", "wearing eyepatch"),
            ]
        ),
    ),
    CategorySpec(
        id="action",
        label="動作 (Pose)",
        scope="subject",
        multi_select=True,
        description="人物的肢體動態",
        options=_options(
            [
                ("站姿", "standing pose"),
                ("坐姿", "sitting"),
                ("躺姿", "lying down"),
                ("騎腳踏車", "riding a bicycle"),
                ("騎機車", "riding a motorcycle"),
                ("開車", "driving a car"),
                ("騎馬", "riding a horse"),
                ("回眸", "looking back"),
                ("雙臂交叉", "crossing arms"),
                ("手托腮", "resting chin on hand"),
                ("撥弄頭髮", "touching hair"),
                ("動態跳躍", "dynamic jumping pose"),
                ("戰鬥姿態", "fighting stance"),
                ("祈禱", "praying pose"),
                ("手插口袋", "hands in pockets"),
            ]
        ),
    ),
    CategorySpec(
        id="hands",
        label="手部互動 (Hands)",
        scope="subject",
        multi_select=True,
        description="手部持有物品或互動",
        options=_options(
            [
                ("拿著咖啡", "holding a coffee cup"),
                ("拿著書", "holding a book"),
                ("看手機", "holding a smartphone"),
                ("拿著劍", "holding a sword"),
                ("拿著花束", "holding flowers"),
                ("比讚", "thumbs up"),
                ("比愛心", "making heart shape with hands"),
                ("拿著相機", "holding a camera"),
            ]
        ),
    ),
    CategorySpec(
        id="mood",
        label="情緒 (Mood)",
        scope="subject",
        multi_select=True,
        description="圖片傳達的感覺 (可多選)",
        options=_options(
            [
                ("快樂", "happy, smiling"),
                ("悲傷", "sad, crying"),
                ("生氣", "angry"),
                ("冷酷", "cool, serious"),
                ("神秘", "mysterious"),
                ("自信", "confident"),
                ("害羞", "shy, blushing"),
                ("厭世", "bored, gloomy"),
                ("驚訝", "surprised"),
                ("寧靜", "peaceful, serene"),
                ("憂鬱", "melancholic atmosphere"),
                ("壯闊", "epic, awe-inspiring"),
            ]
        ),
    ),
    # --- GLOBAL: SCENE & STYLE ---
    CategorySpec(
        id="composition",
        label="構圖與視角 (Composition)",
        scope="global",
        multi_select=True,
        description="鏡頭語言與取景方式",
        options=_options(
            [
                ("特寫 (頭像)", "close-up portrait"),
                ("半身像", "medium shot, upper body"),
                ("全身照", "full body shot"),
                ("低角度仰視 (氣勢)", "low angle view, from below"),
                ("高角度俯視 (渺小)", "high angle view, from above"),
                ("荷蘭式傾斜 (動態)", "Dutch angle"),
                ("自拍視角", "selfie angle"),
                ("三分法構圖", "rule of thirds"),
                ("置中構圖", "symmetrical composition"),
                ("景深 (背景模糊)", "depth of field, blurred background"),
                ("魚眼", "fisheye lens effect"),
                ("GoPro", "GoPro wide view"),
            ]
        ),
    ),
    CategorySpec(
        id="camera_movement",
        label="運鏡方式 (Camera Move)",
        scope="global",
        multi_select=True,
        description="影片專用：鏡頭移動方式",
        options=_options(
            [
                ("推進 (Dolly In)", "camera dolly in"),
                ("拉遠 (Dolly Out)", "camera dolly out"),
                ("左搖 (Pan Left)", "camera pan left"),
                ("右搖 (Pan Right)", "camera pan right"),
                ("上搖 (Tilt Up)", "camera tilt up"),
                ("下搖 (Tilt Down)", "camera tilt down"),
                ("跟拍 (Tracking)", "camera tracking shot"),
                ("環繞 (Orbit)", "camera circling around subject"),
                ("希區考克變焦 (Dolly Zoom)", "dolly zoom effect"),
                ("空拍 (Drone)", "drone shot"),
                ("FPV 穿越", "FPV drone view"),
                ("手持晃動", "handheld camera movement"),
                ("固定鏡頭", "static camera"),
            ]
        ),
    ),
    CategorySpec(
        id="motion_strength",
        label="動態強度 (Motion Strength)",
        scope="global",
        multi_select=True,
        description="影片專用：動作幅度",
        options=_options(
            [
                ("微動 (Subtle)", "subtle motion"),
                ("正常 (Normal)", "normal motion"),
                ("動態 (Dynamic)", "dynamic motion"),
                ("高強度 (High)", "high motion"),
                ("慢動作 (Slow Mo)", "slow motion"),
                ("縮時 (Timelapse)", "timelapse"),
                ("極速 (Hyperlapse)", "hyperlapse"),
            ]
        ),
    ),
    CategorySpec(
        id="environment",
        label="背景環境 (Environment)",
        scope="global",
        multi_select=True,
        description="人像所處的場景",
        options=_options(
            [
                ("純色背景 (棚拍)", "simple solid background"),
                ("都市街道 (夜)", "city street at night"),
                ("繁華十字路口", "busy crosswalk"),
                ("教室", "classroom"),
                ("辦公室", "office interior"),
                ("海灘", "beach"),
                ("森林", "forest"),
                ("咖啡廳", "coffee shop"),
                ("廢墟", "abandoned ruins"),
                ("賽博龐克城市", "cyberpunk city"),
                ("太空站", "space station"),
                ("臥室", "bedroom"),
                ("圖書館", "library"),
                ("屋頂", "rooftop"),
                ("雪山", "snowy mountains"),
                ("沙漠", "desert dunes"),
            ]
        ),
    ),
    CategorySpec(
        id="era",
        label="時代背景 (Era)",
        scope="global",
        description="設定特定的年代氛圍",
        options=_options(
            [
                ("現代 (Modern)", "modern day"),
                ("1920年代 (大亨小傳)", "1920s era, vintage style"),
                ("1980年代 (復古)", "1980s style, retro aesthetic"),
                ("1990年代", "1990s vibe"),
                ("維多利亞時代", "Victorian era"),
                ("中世紀 (奇幻)", "Medieval era"),
                ("賽博龐克 (2077)", "Cyberpunk 2077 era, futuristic"),
                ("江戶時代 (日本)", "Edo period Japan"),
                ("民國風", "Republican China era"),
            ]
        ),
    ),
    CategorySpec(
        id="lighting",
        label="光影 (Lighting)",
        scope="global",
        multi_select=True,
        description="決定氛圍的關鍵 (可多選混搭)",
        options=_options(
            [
                ("自然光", "natural lighting", None, _placeholder("22c55e", "Natural+Light")),
                ("窗光", "window light", None, _placeholder("3b82f6", "Window+Light")),
                ("黃金時刻 (夕陽)", "golden hour", None, _placeholder("f59e0b", "Golden+Hour")),
                ("電影感光效", "cinematic lighting", None, _placeholder("6366f1", "Cinematic")),
                ("雷姆布蘭特光", "Rembrandt lighting", None, _placeholder("7c3aed", "Rembrandt")),
                ("霓虹燈光", "neon lighting", None, _placeholder("ec4899", "Neon")),
                ("柔光箱", "softbox lighting", None, _placeholder("94a3b8", "Softbox")),
                ("輪廓光 (背光)", "rim lighting", None, _placeholder("0f172a", "Rim+Light")),
                ("強烈對比", "high contrast", None, _placeholder("000000", "High+Contrast")),
                ("體積光 (丁達爾)", "volumetric lighting", None, _placeholder("e2e8f0", "Volumetric", "000000")),
            ]
        ),
    ),
    CategorySpec(
        id="color_palette",
        label="色調與濾鏡 (Color Palette)",
        scope="global",
        description="照片的色彩傾向與質感",
        options=_options(
            [
                ("鮮豔色彩", "vivid colors"),
                ("粉彩色調", "pastel color palette"),
                ("黑白攝影", "monochrome photography"),
                ("賽博龐克 (藍紫)", "cyberpunk neon colors"),
                ("大地色系", "earth tones"),
                ("冷色調", "cool color temperature"),
                ("暖色調", "warm color temperature"),
                ("Kodak Portra 400", "Kodak Portra 400 film style"),
                ("Fujifilm", "Fujifilm simulation"),
                ("拍立得質感", "Polaroid style"),
                ("懷舊泛黃 (Sepia)", "sepia tone"),
                ("低飽和度", "desaturated colors"),
            ]
        ),
    ),
    CategorySpec(
        id="art_style",
        label="藝術風格 (Style)",
        scope="global",
        multi_select=True,
        description="圖片的整體質感 (可多選混搭)",
        options=_options(
            [
                ("極致寫實 (Photo)", "Photorealistic, 8k, raw photo"),
                ("電影截圖", "Cinematic film still"),
                ("3D 渲染 (Unreal)", "Unreal Engine 5 render, 3D character"),
                ("2.5D 插畫", "semi-realistic illustration"),
                ("日本動畫 (Anime)", "Anime style, cel shaded"),
                ("油畫", "Oil painting"),
                ("水彩", "Watercolor"),
                ("素描", "Sketch"),
                ("底片感 (Film)", "Analog film, grain, vintage"),
                ("概念藝術", "concept art"),
                ("浮世繪", "Ukiyo-e style"),
            ]
        ),
    ),
    CategorySpec(
        id="camera",
        label="攝影器材 (Camera)",
        scope="global",
        multi_select=True,
        description="鏡頭語言",
        options=_options(
            [
                ("大光圈 (背景虛化)", "f/1.8, bokeh"),
                ("人像鏡 (85mm)", "85mm lens"),
                ("廣角鏡", "wide angle lens"),
                ("長焦鏡", "telephoto lens"),
                ("微距", "macro lens"),
                ("無人機視角", "drone shot"),
            ]
        ),
    ),
    CategorySpec(
        id="aspect_ratio",
        label="解析度/比例 (Resolution)",
        scope="global",
        multi_select=True,
        description="圖片長寬比",
        options=_options(
            [
                ("1:1 (正方形)", "aspect ratio 1:1"),
                ("16:9 (電影感)", "aspect ratio 16:9"),
                ("9:16 (手機直式)", "aspect ratio 9:16"),
                ("4:3 (傳統照片)", "aspect ratio 4:3"),
                ("3:4 (人像照片)", "aspect ratio 3:4"),
                ("21:9 (超寬螢幕)", "aspect ratio 21:9"),
            ]
        ),
    ),
]

QUALITY_TAGS = _options(
    [
        ("傑作", "masterpiece"),
        ("最佳畫質", "best quality"),
        ("超高解析度", "8k"),
        ("高度細節", "highly detailed"),
        ("HDR", "HDR"),
        ("ArtStation 趨勢", "trending on artstation"),
        ("精緻五官", "detailed face"),
    ]
)

PRESERVATION_OPTIONS = _options(
    [
        ("臉部特徵 (Face)", "facial features"),
        ("髮型 (Hair)", "hair style"),
        ("服裝 (Clothing)", "clothing"),
        ("背景 (Background)", "background environment"),
        ("構圖 (Composition)", "image composition"),
        ("色調 (Colors)", "color palette"),
        ("光影 (Lighting)", "lighting conditions"),
    ]
)

DEFAULT_QUALITY = ["masterpiece", "best quality", "8k", "highly detailed", "detailed face"]

DEFAULT_NEGATIVE_PROMPT = (
    "nsfw, lowres, bad anatomy, bad hands, text, error, missing fingers, extra digit, fewer digits, "
    "cropped, worst quality, low quality, normal quality, jpeg artifacts, signature, watermark, username, blur"
)

COMMON_NEGATIVE_PROMPTS = [
    "nsfw",
    "low quality",
    "worst quality",
    "monochrome",
    "lowres",
    "bad anatomy",
    "bad hands",
    "text",
    "error",
    "missing fingers",
    "extra digit",
    "fewer digits",
    "cropped",
    "jpeg artifacts",
    "signature",
    "watermark",
    "username",
    "artist name",
]

# Subject-scope categories that are meaningful for each subject type.
SUBJECT_CATEGORY_CONFIG: Dict[str, List[str]] = {
    "human": [
        "nationality",
        "age",
        "body_type",
        "role",
        "face_shape",
        "eye_gaze",
        "hair_color",
        "hair_style",
        "appearance",
        "clothing",
        "clothing_detail",
        "accessories",
        "action",
        "hands",
        "mood",
    ],
    "animal": ["animal_species", "animal_fur", "appearance", "clothing", "accessories", "action", "mood"],
    "vehicle": ["vehicle_type", "vehicle_color"],
    "scenery": ["mood"],
    "infographic": ["chart_type", "infographic_style"],
}

# Human-centric framing never emitted for landscapes.
SCENERY_FRAMING_BLACKLIST = {
    "close-up portrait",
    "medium shot, upper body",
    "full body shot",
    "selfie angle",
    "85mm lens",
    "telephoto lens",
}

# Moods that presuppose a sentient facial expression.
SCENERY_MOOD_BLACKLIST = {
    "happy, smiling",
    "sad, crying",
    "angry",
    "cool, serious",
    "confident",
    "shy, blushing",
    "bored, gloomy",
    "surprised",
}

# Keywords preferred by themed randomization.
THEME_KEYWORDS: Dict[str, List[str]] = {
    "cyberpunk": ["cyberpunk", "neon", "mechanical", "tech", "futuristic", "blue", "purple", "night", "city", "leather"],
    "fantasy": ["wizard", "elf", "magic", "wood", "forest", "robe", "medieval", "castle", "armor", "sword"],
    "vintage": ["1920s", "1980s", "retro", "film", "grain", "sepia", "faded", "old"],
    "portrait": ["portrait", "studio", "lighting", "bokeh", "85mm", "sharp", "clean"],
}

"""
Approximate centroids for Indian cities and districts.

Used only when a donor or seeker record carries no GPS coordinates. Keys are
lower-case names with the words "city", "town" and "district" already removed.
"""
from types import MappingProxyType

_PLACES = {
    # Metros and major hubs
    "delhi": (28.6139, 77.2090),
    "new delhi": (28.6139, 77.2090),
    "mumbai": (19.0760, 72.8777),
    "bombay": (19.0760, 72.8777),
    "navi mumbai": (19.0330, 73.0297),
    "kolkata": (22.5726, 88.3639),
    "calcutta": (22.5726, 88.3639),
    "bengaluru": (12.9716, 77.5946),
    "bangalore": (12.9716, 77.5946),
    "chennai": (13.0827, 80.2707),
    "madras": (13.0827, 80.2707),
    "hyderabad": (17.3850, 78.4867),
    "secunderabad": (17.4399, 78.4983),
    "ahmedabad": (23.0225, 72.5714),
    "pune": (18.5204, 73.8567),
    "surat": (21.1702, 72.8311),
    "lucknow": (26.8467, 80.9462),
    "jaipur": (26.9124, 75.7873),
    "kanpur": (26.4499, 80.3319),
    "nagpur": (21.1458, 79.0882),
    "indore": (22.7196, 75.8577),
    "thane": (19.2183, 72.9633),
    "bhopal": (23.2599, 77.4126),
    "visakhapatnam": (17.6868, 83.2185),
    "vizag": (17.6868, 83.2185),
    "patna": (25.5941, 85.1376),
    "vadodara": (22.3072, 73.1812),
    "baroda": (22.3072, 73.1812),
    "ghaziabad": (28.6692, 77.4538),
    "noida": (28.5355, 77.3910),
    "gurugram": (28.4595, 77.0266),
    "gurgaon": (28.4595, 77.0266),
    "faridabad": (28.4089, 77.3178),
    "ludhiana": (30.9010, 75.8573),
    "agra": (27.1767, 78.0081),
    "nashik": (19.9975, 73.7898),
    "meerut": (28.9845, 77.7064),
    "rajkot": (22.3039, 70.8022),
    "varanasi": (25.3176, 82.9739),
    "srinagar": (34.0837, 74.7973),
    "amritsar": (31.6340, 74.8723),
    "ranchi": (23.3441, 85.3096),
    "howrah": (22.5958, 88.2636),
    "jabalpur": (23.1815, 79.9864),
    "gwalior": (26.2183, 78.1828),
    "vijayawada": (16.5062, 80.6480),
    "jodhpur": (26.2389, 73.0243),
    "madurai": (9.9252, 78.1198),
    "raipur": (21.2514, 81.6296),
    "guwahati": (26.1445, 91.7362),
    "chandigarh": (30.7333, 76.7794),
    "mohali": (30.7046, 76.7179),
    "bhubaneswar": (20.2961, 85.8245),
    "cuttack": (20.4625, 85.8830),
    "dehradun": (30.3165, 78.0322),
    "jammu": (32.7266, 74.8570),
    "shimla": (31.1048, 77.1734),
    "panaji": (15.4909, 73.8278),
    "goa": (15.2993, 74.1240),
    "shillong": (25.5788, 91.8933),
    "imphal": (24.8170, 93.9368),
    "agartala": (23.8315, 91.2868),
    "aizawl": (23.7271, 92.7176),
    "kohima": (25.6751, 94.1086),
    "itanagar": (27.0844, 93.6053),
    "gangtok": (27.3389, 88.6065),
    "puducherry": (11.9416, 79.8083),
    "pondicherry": (11.9416, 79.8083),
    "port blair": (11.6234, 92.7265),

    # Uttar Pradesh, Uttarakhand
    "prayagraj": (25.4358, 81.8463),
    "allahabad": (25.4358, 81.8463),
    "gorakhpur": (26.7606, 83.3732),
    "bareilly": (28.3670, 79.4304),
    "aligarh": (27.8974, 78.0880),
    "moradabad": (28.8386, 78.7733),
    "saharanpur": (29.9680, 77.5552),
    "jhansi": (25.4484, 78.5685),
    "mathura": (27.4924, 77.6737),
    "ayodhya": (26.7922, 82.1998),
    "haridwar": (29.9457, 78.1642),
    "rishikesh": (30.0869, 78.2676),
    "haldwani": (29.2183, 79.5130),

    # Rajasthan, Gujarat, Madhya Pradesh
    "udaipur": (24.5854, 73.7125),
    "kota": (25.2138, 75.8648),
    "ajmer": (26.4499, 74.6399),
    "bikaner": (28.0229, 73.3119),
    "alwar": (27.5530, 76.6346),
    "bhavnagar": (21.7645, 72.1519),
    "jamnagar": (22.4707, 70.0577),
    "gandhinagar": (23.2156, 72.6369),
    "anand": (22.5645, 72.9289),
    "ujjain": (23.1765, 75.7885),
    "sagar": (23.8388, 78.7378),
    "satna": (24.6005, 80.8322),

    # Maharashtra
    "aurangabad": (19.8762, 75.3433),
    "solapur": (17.6599, 75.9064),
    "kolhapur": (16.7050, 74.2433),
    "amravati": (20.9374, 77.7796),
    "sangli": (16.8524, 74.5815),
    "akola": (20.7002, 77.0082),
    "latur": (18.4088, 76.5604),
    "nanded": (19.1383, 77.3210),
    "ahmednagar": (19.0948, 74.7480),
    "satara": (17.6805, 74.0183),
    "ratnagiri": (16.9902, 73.3120),

    # Punjab, Haryana, Himachal, J&K
    "jalandhar": (31.3260, 75.5762),
    "patiala": (30.3398, 76.3869),
    "bathinda": (30.2110, 74.9455),
    "panipat": (29.3909, 76.9635),
    "ambala": (30.3782, 76.7767),
    "karnal": (29.6857, 76.9905),
    "rohtak": (28.8955, 76.6066),
    "hisar": (29.1492, 75.7217),
    "dharamshala": (32.2190, 76.3234),
    "manali": (32.2396, 77.1887),

    # East and North-East
    "dhanbad": (23.7957, 86.4304),
    "jamshedpur": (22.8046, 86.2029),
    "bokaro": (23.6693, 86.1511),
    "gaya": (24.7914, 85.0002),
    "bhagalpur": (25.2425, 86.9842),
    "muzaffarpur": (26.1209, 85.3647),
    "siliguri": (26.7271, 88.3953),
    "durgapur": (23.5204, 87.3119),
    "asansol": (23.6739, 86.9524),
    "darjeeling": (27.0410, 88.2663),
    "rourkela": (22.2604, 84.8536),
    "berhampur": (19.3150, 84.7941),
    "sambalpur": (21.4669, 83.9812),
    "puri": (19.8135, 85.8312),
    "dibrugarh": (27.4728, 94.9120),
    "silchar": (24.8333, 92.7789),
    "jorhat": (26.7509, 94.2037),
    "bilaspur": (22.0797, 82.1391),
    "bhilai": (21.1938, 81.3509),

    # Andhra Pradesh, Telangana
    "guntur": (16.3067, 80.4365),
    "nellore": (14.4426, 79.9865),
    "kurnool": (15.8281, 78.0373),
    "tirupati": (13.6288, 79.4192),
    "rajahmundry": (16.9891, 81.7840),
    "kakinada": (16.9891, 82.2475),
    "kadapa": (14.4674, 78.8241),
    "anantapur": (14.6819, 77.6006),
    "ongole": (15.5057, 80.0499),
    "eluru": (16.7107, 81.0952),
    "srikakulam": (18.2949, 83.8938),
    "vizianagaram": (18.1067, 83.3956),
    "warangal": (17.9689, 79.5941),
    "nizamabad": (18.6725, 78.0941),
    "khammam": (17.2473, 80.1514),
    "karimnagar": (18.4386, 79.1288),
    "mahbubnagar": (16.7488, 78.0035),
    "adilabad": (19.6641, 78.5320),
    "nalgonda": (17.0575, 79.2684),
    "suryapet": (17.1405, 79.6200),
    "ramagundam": (18.7550, 79.4740),

    # Karnataka
    "mysuru": (12.2958, 76.6394),
    "mysore": (12.2958, 76.6394),
    "mangaluru": (12.9141, 74.8560),
    "mangalore": (12.9141, 74.8560),
    "hubballi": (15.3647, 75.1240),
    "hubli": (15.3647, 75.1240),
    "dharwad": (15.4589, 75.0078),
    "belagavi": (15.8497, 74.4977),
    "belgaum": (15.8497, 74.4977),
    "kalaburagi": (17.3297, 76.8343),
    "gulbarga": (17.3297, 76.8343),
    "davanagere": (14.4644, 75.9218),
    "ballari": (15.1394, 76.9214),
    "bellary": (15.1394, 76.9214),
    "shivamogga": (13.9299, 75.5681),
    "shimoga": (13.9299, 75.5681),
    "tumakuru": (13.3379, 77.1173),
    "udupi": (13.3409, 74.7421),
    "hassan": (13.0072, 76.0962),
    "vijayapura": (16.8302, 75.7100),

    # Tamil Nadu
    "coimbatore": (11.0168, 76.9558),
    "tiruchirappalli": (10.7905, 78.7047),
    "trichy": (10.7905, 78.7047),
    "salem": (11.6643, 78.1460),
    "tirunelveli": (8.7139, 77.7567),
    "tiruppur": (11.1085, 77.3411),
    "erode": (11.3410, 77.7172),
    "vellore": (12.9165, 79.1325),
    "thoothukudi": (8.7642, 78.1348),
    "tuticorin": (8.7642, 78.1348),
    "thanjavur": (10.7870, 79.1378),
    "dindigul": (10.3673, 77.9803),
    "nagercoil": (8.1833, 77.4119),
    "kanchipuram": (12.8342, 79.7036),
    "cuddalore": (11.7480, 79.7714),
    "karur": (10.9601, 78.0766),
    "hosur": (12.7409, 77.8253),
    "ooty": (11.4102, 76.6950),

    # Kerala
    "thiruvananthapuram": (8.5241, 76.9366),
    "trivandrum": (8.5241, 76.9366),
    "kollam": (8.8932, 76.6141),
    "pathanamthitta": (9.2648, 76.7870),
    "alappuzha": (9.4981, 76.3388),
    "alleppey": (9.4981, 76.3388),
    "kottayam": (9.5916, 76.5222),
    "idukki": (9.8500, 76.9167),
    "ernakulam": (9.9816, 76.2999),
    "kochi": (9.9312, 76.2673),
    "cochin": (9.9312, 76.2673),
    "thrissur": (10.5276, 76.2144),
    "palakkad": (10.7867, 76.6548),
    "malappuram": (11.0510, 76.0711),
    "kozhikode": (11.2588, 75.7804),
    "calicut": (11.2588, 75.7804),
    "wayanad": (11.6854, 76.1320),
    "kannur": (11.8745, 75.3704),
    "kasaragod": (12.4996, 74.9869),
    "pala": (9.7100, 76.6800),
    "changanassery": (9.4447, 76.5390),
    "kanjirappally": (9.5558, 76.7914),
    "thiruvalla": (9.3878, 76.5746),
    "chengannur": (9.3300, 76.6100),
    "chunkappara": (9.4536, 76.7439),
    "koovapally": (9.5108, 76.8227),
    "kottarakkara": (8.9986, 76.7717),
    "aluva": (10.1076, 76.3511),
    "angamaly": (10.1983, 76.3860),
    "ettumanoor": (9.6700, 76.5600),
    "ponkunnam": (9.5833, 76.7500),
    "erattupetta": (9.6917, 76.7861),
    "vazhoor": (9.5847, 76.7000),
    "kattappana": (9.7161, 77.0863),
    "munnar": (10.0889, 77.0595),
    "ranni": (9.3846, 76.7876),
    "adoor": (9.1555, 76.7300),
    "mundakayam": (9.5333, 76.8833),
    "muvattupuzha": (9.9880, 76.5794),
    "kozhencherry": (9.3333, 76.7000),
    "pandalam": (9.2333, 76.6833),
    "konni": (9.2333, 76.8500),
    "perumbavoor": (10.1155, 76.4770),
    "kothamangalam": (10.0602, 76.6351),
    "thodupuzha": (9.8959, 76.7184),
    "guruvayur": (10.5943, 76.0411),
    "chalakudy": (10.3070, 76.3341),
    "ottapalam": (10.7700, 76.3770),
    "tirur": (10.9146, 75.9220),
    "vadakara": (11.6086, 75.5917),
    "thalassery": (11.7491, 75.4890),
    "payyanur": (12.0993, 75.2012),
    "neyyattinkara": (8.4000, 77.0833),
    "attingal": (8.6960, 76.8150),
    "varkala": (8.7379, 76.7163),
    "cherthala": (9.6847, 76.3364),
    "kayamkulam": (9.1748, 76.5013),
    "mavelikkara": (9.2500, 76.5500),
    "haripad": (9.2800, 76.4600),
    "vaikom": (9.7490, 76.3960),
}

INDIA_COORDINATES = MappingProxyType(_PLACES)

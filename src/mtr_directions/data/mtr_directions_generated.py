# Generated by `mtr-directions generate` from mtr_lines_and_stations.csv - do not edit manually

MTR_LINE_DIRECTIONS = [
    {
        "line_code": "AEL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "HOK", "id": "44", "name_zh": "香港", "name_en": "Hong Kong", "sequence": 1},
            {"code": "KOW", "id": "45", "name_zh": "九龍", "name_en": "Kowloon", "sequence": 2},
            {"code": "TSY", "id": "46", "name_zh": "青衣", "name_en": "Tsing Yi", "sequence": 3},
            {"code": "AIR", "id": "47", "name_zh": "機場", "name_en": "Airport", "sequence": 4},
            {"code": "AWE", "id": "56", "name_zh": "博覽館", "name_en": "AsiaWorld-Expo", "sequence": 5},
        ],
        "start_termini": ["HOK"],
        "end_termini": ["AWE"],
    },
    {
        "line_code": "AEL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "AWE", "id": "56", "name_zh": "博覽館", "name_en": "AsiaWorld-Expo", "sequence": 1},
            {"code": "AIR", "id": "47", "name_zh": "機場", "name_en": "Airport", "sequence": 2},
            {"code": "TSY", "id": "46", "name_zh": "青衣", "name_en": "Tsing Yi", "sequence": 3},
            {"code": "KOW", "id": "45", "name_zh": "九龍", "name_en": "Kowloon", "sequence": 4},
            {"code": "HOK", "id": "44", "name_zh": "香港", "name_en": "Hong Kong", "sequence": 5},
        ],
        "start_termini": ["AWE"],
        "end_termini": ["HOK"],
    },
    {
        "line_code": "DRL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "SUN", "id": "55", "name_zh": "欣澳", "name_en": "Sunny Bay", "sequence": 1},
            {"code": "DIS", "id": "95", "name_zh": "迪士尼", "name_en": "Disneyland Resort", "sequence": 2},
        ],
        "start_termini": ["SUN"],
        "end_termini": ["DIS"],
    },
    {
        "line_code": "DRL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "DIS", "id": "95", "name_zh": "迪士尼", "name_en": "Disneyland Resort", "sequence": 1},
            {"code": "SUN", "id": "55", "name_zh": "欣澳", "name_en": "Sunny Bay", "sequence": 2},
        ],
        "start_termini": ["DIS"],
        "end_termini": ["SUN"],
    },
    {
        "line_code": "EAL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "ADM", "id": "2", "name_zh": "金鐘", "name_en": "Admiralty", "sequence": 1},
            {"code": "EXC", "id": "94", "name_zh": "會展", "name_en": "Exhibition Centre", "sequence": 2},
            {"code": "HUH", "id": "64", "name_zh": "紅磡", "name_en": "Hung Hom", "sequence": 3},
            {"code": "MKK", "id": "65", "name_zh": "旺角東", "name_en": "Mong Kok East", "sequence": 4},
            {"code": "KOT", "id": "66", "name_zh": "九龍塘", "name_en": "Kowloon Tong", "sequence": 5},
            {"code": "TAW", "id": "67", "name_zh": "大圍", "name_en": "Tai Wai", "sequence": 6},
            {"code": "SHT", "id": "68", "name_zh": "沙田", "name_en": "Sha Tin", "sequence": 7},
            {"code": "FOT", "id": "69", "name_zh": "火炭", "name_en": "Fo Tan", "sequence": 8},
            {"code": "RAC", "id": "70", "name_zh": "馬場", "name_en": "Racecourse", "sequence": 9},
            {"code": "UNI", "id": "71", "name_zh": "大學", "name_en": "University", "sequence": 10},
            {"code": "TAP", "id": "72", "name_zh": "大埔墟", "name_en": "Tai Po Market", "sequence": 11},
            {"code": "TWO", "id": "73", "name_zh": "太和", "name_en": "Tai Wo", "sequence": 12},
            {"code": "FAN", "id": "74", "name_zh": "粉嶺", "name_en": "Fanling", "sequence": 13},
            {"code": "SHS", "id": "75", "name_zh": "上水", "name_en": "Sheung Shui", "sequence": 14},
            {"code": "LMC", "id": "78", "name_zh": "落馬洲", "name_en": "Lok Ma Chau", "sequence": 15},
            {"code": "LOW", "id": "76", "name_zh": "羅湖", "name_en": "Lo Wu", "sequence": 16},
        ],
        "start_termini": ["ADM"],
        "end_termini": ["LMC", "LOW"],
    },
    {
        "line_code": "EAL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "LMC", "id": "78", "name_zh": "落馬洲", "name_en": "Lok Ma Chau", "sequence": 1},
            {"code": "LOW", "id": "76", "name_zh": "羅湖", "name_en": "Lo Wu", "sequence": 2},
            {"code": "SHS", "id": "75", "name_zh": "上水", "name_en": "Sheung Shui", "sequence": 3},
            {"code": "FAN", "id": "74", "name_zh": "粉嶺", "name_en": "Fanling", "sequence": 4},
            {"code": "TWO", "id": "73", "name_zh": "太和", "name_en": "Tai Wo", "sequence": 5},
            {"code": "TAP", "id": "72", "name_zh": "大埔墟", "name_en": "Tai Po Market", "sequence": 6},
            {"code": "UNI", "id": "71", "name_zh": "大學", "name_en": "University", "sequence": 7},
            {"code": "RAC", "id": "70", "name_zh": "馬場", "name_en": "Racecourse", "sequence": 8},
            {"code": "FOT", "id": "69", "name_zh": "火炭", "name_en": "Fo Tan", "sequence": 9},
            {"code": "SHT", "id": "68", "name_zh": "沙田", "name_en": "Sha Tin", "sequence": 10},
            {"code": "TAW", "id": "67", "name_zh": "大圍", "name_en": "Tai Wai", "sequence": 11},
            {"code": "KOT", "id": "66", "name_zh": "九龍塘", "name_en": "Kowloon Tong", "sequence": 12},
            {"code": "MKK", "id": "65", "name_zh": "旺角東", "name_en": "Mong Kok East", "sequence": 13},
            {"code": "HUH", "id": "64", "name_zh": "紅磡", "name_en": "Hung Hom", "sequence": 14},
            {"code": "EXC", "id": "94", "name_zh": "會展", "name_en": "Exhibition Centre", "sequence": 15},
            {"code": "ADM", "id": "2", "name_zh": "金鐘", "name_en": "Admiralty", "sequence": 16},
        ],
        "start_termini": ["LMC", "LOW"],
        "end_termini": ["ADM"],
    },
    {
        "line_code": "ISL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "KET", "id": "83", "name_zh": "堅尼地城", "name_en": "Kennedy Town", "sequence": 1},
            {"code": "HKU", "id": "82", "name_zh": "香港大學", "name_en": "HKU", "sequence": 2},
            {"code": "SYP", "id": "81", "name_zh": "西營盤", "name_en": "Sai Ying Pun", "sequence": 3},
            {"code": "SHW", "id": "26", "name_zh": "上環", "name_en": "Sheung Wan", "sequence": 4},
            {"code": "CEN", "id": "1", "name_zh": "中環", "name_en": "Central", "sequence": 5},
            {"code": "ADM", "id": "2", "name_zh": "金鐘", "name_en": "Admiralty", "sequence": 6},
            {"code": "WAC", "id": "27", "name_zh": "灣仔", "name_en": "Wan Chai", "sequence": 7},
            {"code": "CAB", "id": "28", "name_zh": "銅鑼灣", "name_en": "Causeway Bay", "sequence": 8},
            {"code": "TIH", "id": "29", "name_zh": "天后", "name_en": "Tin Hau", "sequence": 9},
            {"code": "FOH", "id": "30", "name_zh": "炮台山", "name_en": "Fortress Hill", "sequence": 10},
            {"code": "NOP", "id": "31", "name_zh": "北角", "name_en": "North Point", "sequence": 11},
            {"code": "QUB", "id": "32", "name_zh": "鰂魚涌", "name_en": "Quarry Bay", "sequence": 12},
            {"code": "TAK", "id": "33", "name_zh": "太古", "name_en": "Tai Koo", "sequence": 13},
            {"code": "SWH", "id": "34", "name_zh": "西灣河", "name_en": "Sai Wan Ho", "sequence": 14},
            {"code": "SKW", "id": "35", "name_zh": "筲箕灣", "name_en": "Shau Kei Wan", "sequence": 15},
            {"code": "HFC", "id": "36", "name_zh": "杏花邨", "name_en": "Heng Fa Chuen", "sequence": 16},
            {"code": "CHW", "id": "37", "name_zh": "柴灣", "name_en": "Chai Wan", "sequence": 17},
        ],
        "start_termini": ["KET"],
        "end_termini": ["CHW"],
    },
    {
        "line_code": "ISL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "CHW", "id": "37", "name_zh": "柴灣", "name_en": "Chai Wan", "sequence": 1},
            {"code": "HFC", "id": "36", "name_zh": "杏花邨", "name_en": "Heng Fa Chuen", "sequence": 2},
            {"code": "SKW", "id": "35", "name_zh": "筲箕灣", "name_en": "Shau Kei Wan", "sequence": 3},
            {"code": "SWH", "id": "34", "name_zh": "西灣河", "name_en": "Sai Wan Ho", "sequence": 4},
            {"code": "TAK", "id": "33", "name_zh": "太古", "name_en": "Tai Koo", "sequence": 5},
            {"code": "QUB", "id": "32", "name_zh": "鰂魚涌", "name_en": "Quarry Bay", "sequence": 6},
            {"code": "NOP", "id": "31", "name_zh": "北角", "name_en": "North Point", "sequence": 7},
            {"code": "FOH", "id": "30", "name_zh": "炮台山", "name_en": "Fortress Hill", "sequence": 8},
            {"code": "TIH", "id": "29", "name_zh": "天后", "name_en": "Tin Hau", "sequence": 9},
            {"code": "CAB", "id": "28", "name_zh": "銅鑼灣", "name_en": "Causeway Bay", "sequence": 10},
            {"code": "WAC", "id": "27", "name_zh": "灣仔", "name_en": "Wan Chai", "sequence": 11},
            {"code": "ADM", "id": "2", "name_zh": "金鐘", "name_en": "Admiralty", "sequence": 12},
            {"code": "CEN", "id": "1", "name_zh": "中環", "name_en": "Central", "sequence": 13},
            {"code": "SHW", "id": "26", "name_zh": "上環", "name_en": "Sheung Wan", "sequence": 14},
            {"code": "SYP", "id": "81", "name_zh": "西營盤", "name_en": "Sai Ying Pun", "sequence": 15},
            {"code": "HKU", "id": "82", "name_zh": "香港大學", "name_en": "HKU", "sequence": 16},
            {"code": "KET", "id": "83", "name_zh": "堅尼地城", "name_en": "Kennedy Town", "sequence": 17},
        ],
        "start_termini": ["CHW"],
        "end_termini": ["KET"],
    },
    {
        "line_code": "KTL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "WHA", "id": "85", "name_zh": "黃埔", "name_en": "Whampoa", "sequence": 1},
            {"code": "HOM", "id": "84", "name_zh": "何文田", "name_en": "Ho Man Tin", "sequence": 2},
            {"code": "YMT", "id": "5", "name_zh": "油麻地", "name_en": "Yau Ma Tei", "sequence": 3},
            {"code": "MOK", "id": "6", "name_zh": "旺角", "name_en": "Mong Kok", "sequence": 4},
            {"code": "PRE", "id": "16", "name_zh": "太子", "name_en": "Prince Edward", "sequence": 5},
            {"code": "SKM", "id": "7", "name_zh": "石硤尾", "name_en": "Shek Kip Mei", "sequence": 6},
            {"code": "KOT", "id": "8", "name_zh": "九龍塘", "name_en": "Kowloon Tong", "sequence": 7},
            {"code": "LOF", "id": "9", "name_zh": "樂富", "name_en": "Lok Fu", "sequence": 8},
            {"code": "WTS", "id": "10", "name_zh": "黃大仙", "name_en": "Wong Tai Sin", "sequence": 9},
            {"code": "DIH", "id": "11", "name_zh": "鑽石山", "name_en": "Diamond Hill", "sequence": 10},
            {"code": "CHH", "id": "12", "name_zh": "彩虹", "name_en": "Choi Hung", "sequence": 11},
            {"code": "KOB", "id": "13", "name_zh": "九龍灣", "name_en": "Kowloon Bay", "sequence": 12},
            {"code": "NTK", "id": "14", "name_zh": "牛頭角", "name_en": "Ngau Tau Kok", "sequence": 13},
            {"code": "KWT", "id": "15", "name_zh": "觀塘", "name_en": "Kwun Tong", "sequence": 14},
            {"code": "LAT", "id": "38", "name_zh": "藍田", "name_en": "Lam Tin", "sequence": 15},
            {"code": "YAT", "id": "48", "name_zh": "油塘", "name_en": "Yau Tong", "sequence": 16},
            {"code": "TIK", "id": "49", "name_zh": "調景嶺", "name_en": "Tiu Keng Leng", "sequence": 17},
        ],
        "start_termini": ["WHA"],
        "end_termini": ["TIK"],
    },
    {
        "line_code": "KTL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "TIK", "id": "49", "name_zh": "調景嶺", "name_en": "Tiu Keng Leng", "sequence": 1},
            {"code": "YAT", "id": "48", "name_zh": "油塘", "name_en": "Yau Tong", "sequence": 2},
            {"code": "LAT", "id": "38", "name_zh": "藍田", "name_en": "Lam Tin", "sequence": 3},
            {"code": "KWT", "id": "15", "name_zh": "觀塘", "name_en": "Kwun Tong", "sequence": 4},
            {"code": "NTK", "id": "14", "name_zh": "牛頭角", "name_en": "Ngau Tau Kok", "sequence": 5},
            {"code": "KOB", "id": "13", "name_zh": "九龍灣", "name_en": "Kowloon Bay", "sequence": 6},
            {"code": "CHH", "id": "12", "name_zh": "彩虹", "name_en": "Choi Hung", "sequence": 7},
            {"code": "DIH", "id": "11", "name_zh": "鑽石山", "name_en": "Diamond Hill", "sequence": 8},
            {"code": "WTS", "id": "10", "name_zh": "黃大仙", "name_en": "Wong Tai Sin", "sequence": 9},
            {"code": "LOF", "id": "9", "name_zh": "樂富", "name_en": "Lok Fu", "sequence": 10},
            {"code": "KOT", "id": "8", "name_zh": "九龍塘", "name_en": "Kowloon Tong", "sequence": 11},
            {"code": "SKM", "id": "7", "name_zh": "石硤尾", "name_en": "Shek Kip Mei", "sequence": 12},
            {"code": "PRE", "id": "16", "name_zh": "太子", "name_en": "Prince Edward", "sequence": 13},
            {"code": "MOK", "id": "6", "name_zh": "旺角", "name_en": "Mong Kok", "sequence": 14},
            {"code": "YMT", "id": "5", "name_zh": "油麻地", "name_en": "Yau Ma Tei", "sequence": 15},
            {"code": "HOM", "id": "84", "name_zh": "何文田", "name_en": "Ho Man Tin", "sequence": 16},
            {"code": "WHA", "id": "85", "name_zh": "黃埔", "name_en": "Whampoa", "sequence": 17},
        ],
        "start_termini": ["TIK"],
        "end_termini": ["WHA"],
    },
    {
        "line_code": "SIL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "ADM", "id": "2", "name_zh": "金鐘", "name_en": "Admiralty", "sequence": 1},
            {"code": "OCP", "id": "86", "name_zh": "海洋公園", "name_en": "Ocean Park", "sequence": 2},
            {"code": "WCH", "id": "87", "name_zh": "黃竹坑", "name_en": "Wong Chuk Hang", "sequence": 3},
            {"code": "LET", "id": "88", "name_zh": "利東", "name_en": "Lei Tung", "sequence": 4},
            {"code": "SOH", "id": "89", "name_zh": "海怡半島", "name_en": "South Horizons", "sequence": 5},
        ],
        "start_termini": ["ADM"],
        "end_termini": ["SOH"],
    },
    {
        "line_code": "SIL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "SOH", "id": "89", "name_zh": "海怡半島", "name_en": "South Horizons", "sequence": 1},
            {"code": "LET", "id": "88", "name_zh": "利東", "name_en": "Lei Tung", "sequence": 2},
            {"code": "WCH", "id": "87", "name_zh": "黃竹坑", "name_en": "Wong Chuk Hang", "sequence": 3},
            {"code": "OCP", "id": "86", "name_zh": "海洋公園", "name_en": "Ocean Park", "sequence": 4},
            {"code": "ADM", "id": "2", "name_zh": "金鐘", "name_en": "Admiralty", "sequence": 5},
        ],
        "start_termini": ["SOH"],
        "end_termini": ["ADM"],
    },
    {
        "line_code": "TCL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "HOK", "id": "39", "name_zh": "香港", "name_en": "Hong Kong", "sequence": 1},
            {"code": "KOW", "id": "40", "name_zh": "九龍", "name_en": "Kowloon", "sequence": 2},
            {"code": "OLY", "id": "41", "name_zh": "奧運", "name_en": "Olympic", "sequence": 3},
            {"code": "NAC", "id": "53", "name_zh": "南昌", "name_en": "Nam Cheong", "sequence": 4},
            {"code": "LAK", "id": "54", "name_zh": "荔景", "name_en": "Lai King", "sequence": 5},
            {"code": "TSY", "id": "42", "name_zh": "青衣", "name_en": "Tsing Yi", "sequence": 6},
            {"code": "SUN", "id": "55", "name_zh": "欣澳", "name_en": "Sunny Bay", "sequence": 7},
            {"code": "TUC", "id": "43", "name_zh": "東涌", "name_en": "Tung Chung", "sequence": 8},
        ],
        "start_termini": ["HOK"],
        "end_termini": ["TUC"],
    },
    {
        "line_code": "TCL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "TUC", "id": "43", "name_zh": "東涌", "name_en": "Tung Chung", "sequence": 1},
            {"code": "SUN", "id": "55", "name_zh": "欣澳", "name_en": "Sunny Bay", "sequence": 2},
            {"code": "TSY", "id": "42", "name_zh": "青衣", "name_en": "Tsing Yi", "sequence": 3},
            {"code": "LAK", "id": "54", "name_zh": "荔景", "name_en": "Lai King", "sequence": 4},
            {"code": "NAC", "id": "53", "name_zh": "南昌", "name_en": "Nam Cheong", "sequence": 5},
            {"code": "OLY", "id": "41", "name_zh": "奧運", "name_en": "Olympic", "sequence": 6},
            {"code": "KOW", "id": "40", "name_zh": "九龍", "name_en": "Kowloon", "sequence": 7},
            {"code": "HOK", "id": "39", "name_zh": "香港", "name_en": "Hong Kong", "sequence": 8},
        ],
        "start_termini": ["TUC"],
        "end_termini": ["HOK"],
    },
    {
        "line_code": "TKL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "NOP", "id": "31", "name_zh": "北角", "name_en": "North Point", "sequence": 1},
            {"code": "QUB", "id": "32", "name_zh": "鰂魚涌", "name_en": "Quarry Bay", "sequence": 2},
            {"code": "YAT", "id": "48", "name_zh": "油塘", "name_en": "Yau Tong", "sequence": 3},
            {"code": "TIK", "id": "49", "name_zh": "調景嶺", "name_en": "Tiu Keng Leng", "sequence": 4},
            {"code": "TKO", "id": "50", "name_zh": "將軍澳", "name_en": "Tseung Kwan O", "sequence": 5},
            {"code": "HAH", "id": "51", "name_zh": "坑口", "name_en": "Hang Hau", "sequence": 6},
            {"code": "LHP", "id": "57", "name_zh": "康城", "name_en": "LOHAS Park", "sequence": 7},
            {"code": "POA", "id": "52", "name_zh": "寶琳", "name_en": "Po Lam", "sequence": 8},
        ],
        "start_termini": ["NOP"],
        "end_termini": ["LHP", "POA"],
    },
    {
        "line_code": "TKL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "LHP", "id": "57", "name_zh": "康城", "name_en": "LOHAS Park", "sequence": 1},
            {"code": "POA", "id": "52", "name_zh": "寶琳", "name_en": "Po Lam", "sequence": 2},
            {"code": "HAH", "id": "51", "name_zh": "坑口", "name_en": "Hang Hau", "sequence": 3},
            {"code": "TKO", "id": "50", "name_zh": "將軍澳", "name_en": "Tseung Kwan O", "sequence": 4},
            {"code": "TIK", "id": "49", "name_zh": "調景嶺", "name_en": "Tiu Keng Leng", "sequence": 5},
            {"code": "YAT", "id": "48", "name_zh": "油塘", "name_en": "Yau Tong", "sequence": 6},
            {"code": "QUB", "id": "32", "name_zh": "鰂魚涌", "name_en": "Quarry Bay", "sequence": 7},
            {"code": "NOP", "id": "31", "name_zh": "北角", "name_en": "North Point", "sequence": 8},
        ],
        "start_termini": ["LHP", "POA"],
        "end_termini": ["NOP"],
    },
    {
        "line_code": "TML",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "WKS", "id": "103", "name_zh": "烏溪沙", "name_en": "Wu Kai Sha", "sequence": 1},
            {"code": "MOS", "id": "102", "name_zh": "馬鞍山", "name_en": "Ma On Shan", "sequence": 2},
            {"code": "HEO", "id": "101", "name_zh": "恆安", "name_en": "Heng On", "sequence": 3},
            {"code": "TSH", "id": "100", "name_zh": "大水坑", "name_en": "Tai Shui Hang", "sequence": 4},
            {"code": "SHM", "id": "99", "name_zh": "石門", "name_en": "Shek Mun", "sequence": 5},
            {"code": "CIO", "id": "98", "name_zh": "第一城", "name_en": "City One", "sequence": 6},
            {"code": "STW", "id": "97", "name_zh": "沙田圍", "name_en": "Sha Tin Wai", "sequence": 7},
            {"code": "CKT", "id": "96", "name_zh": "車公廟", "name_en": "Che Kung Temple", "sequence": 8},
            {"code": "TAW", "id": "67", "name_zh": "大圍", "name_en": "Tai Wai", "sequence": 9},
            {"code": "HIK", "id": "90", "name_zh": "顯徑", "name_en": "Hin Keng", "sequence": 10},
            {"code": "DIH", "id": "11", "name_zh": "鑽石山", "name_en": "Diamond Hill", "sequence": 11},
            {"code": "KAT", "id": "91", "name_zh": "啟德", "name_en": "Kai Tak", "sequence": 12},
            {"code": "SUW", "id": "92", "name_zh": "宋皇臺", "name_en": "Sung Wong Toi", "sequence": 13},
            {"code": "TKW", "id": "93", "name_zh": "土瓜灣", "name_en": "To Kwa Wan", "sequence": 14},
            {"code": "HOM", "id": "84", "name_zh": "何文田", "name_en": "Ho Man Tin", "sequence": 15},
            {"code": "HUH", "id": "64", "name_zh": "紅磡", "name_en": "Hung Hom", "sequence": 16},
            {"code": "ETS", "id": "80", "name_zh": "尖東", "name_en": "East Tsim Sha Tsui", "sequence": 17},
            {"code": "AUS", "id": "111", "name_zh": "柯士甸", "name_en": "Austin", "sequence": 18},
            {"code": "NAC", "id": "53", "name_zh": "南昌", "name_en": "Nam Cheong", "sequence": 19},
            {"code": "MEF", "id": "20", "name_zh": "美孚", "name_en": "Mei Foo", "sequence": 20},
            {"code": "TWW", "id": "114", "name_zh": "荃灣西", "name_en": "Tsuen Wan West", "sequence": 21},
            {"code": "KSR", "id": "115", "name_zh": "錦上路", "name_en": "Kam Sheung Road", "sequence": 22},
            {"code": "YUL", "id": "116", "name_zh": "元朗", "name_en": "Yuen Long", "sequence": 23},
            {"code": "LOP", "id": "117", "name_zh": "朗屏", "name_en": "Long Ping", "sequence": 24},
            {"code": "TIS", "id": "118", "name_zh": "天水圍", "name_en": "Tin Shui Wai", "sequence": 25},
            {"code": "SIH", "id": "119", "name_zh": "兆康", "name_en": "Siu Hong", "sequence": 26},
            {"code": "TUM", "id": "120", "name_zh": "屯門", "name_en": "Tuen Mun", "sequence": 27},
        ],
        "start_termini": ["WKS"],
        "end_termini": ["TUM"],
    },
    {
        "line_code": "TML",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "TUM", "id": "120", "name_zh": "屯門", "name_en": "Tuen Mun", "sequence": 1},
            {"code": "SIH", "id": "119", "name_zh": "兆康", "name_en": "Siu Hong", "sequence": 2},
            {"code": "TIS", "id": "118", "name_zh": "天水圍", "name_en": "Tin Shui Wai", "sequence": 3},
            {"code": "LOP", "id": "117", "name_zh": "朗屏", "name_en": "Long Ping", "sequence": 4},
            {"code": "YUL", "id": "116", "name_zh": "元朗", "name_en": "Yuen Long", "sequence": 5},
            {"code": "KSR", "id": "115", "name_zh": "錦上路", "name_en": "Kam Sheung Road", "sequence": 6},
            {"code": "TWW", "id": "114", "name_zh": "荃灣西", "name_en": "Tsuen Wan West", "sequence": 7},
            {"code": "MEF", "id": "20", "name_zh": "美孚", "name_en": "Mei Foo", "sequence": 8},
            {"code": "NAC", "id": "53", "name_zh": "南昌", "name_en": "Nam Cheong", "sequence": 9},
            {"code": "AUS", "id": "111", "name_zh": "柯士甸", "name_en": "Austin", "sequence": 10},
            {"code": "ETS", "id": "80", "name_zh": "尖東", "name_en": "East Tsim Sha Tsui", "sequence": 11},
            {"code": "HUH", "id": "64", "name_zh": "紅磡", "name_en": "Hung Hom", "sequence": 12},
            {"code": "HOM", "id": "84", "name_zh": "何文田", "name_en": "Ho Man Tin", "sequence": 13},
            {"code": "TKW", "id": "93", "name_zh": "土瓜灣", "name_en": "To Kwa Wan", "sequence": 14},
            {"code": "SUW", "id": "92", "name_zh": "宋皇臺", "name_en": "Sung Wong Toi", "sequence": 15},
            {"code": "KAT", "id": "91", "name_zh": "啟德", "name_en": "Kai Tak", "sequence": 16},
            {"code": "DIH", "id": "11", "name_zh": "鑽石山", "name_en": "Diamond Hill", "sequence": 17},
            {"code": "HIK", "id": "90", "name_zh": "顯徑", "name_en": "Hin Keng", "sequence": 18},
            {"code": "TAW", "id": "67", "name_zh": "大圍", "name_en": "Tai Wai", "sequence": 19},
            {"code": "CKT", "id": "96", "name_zh": "車公廟", "name_en": "Che Kung Temple", "sequence": 20},
            {"code": "STW", "id": "97", "name_zh": "沙田圍", "name_en": "Sha Tin Wai", "sequence": 21},
            {"code": "CIO", "id": "98", "name_zh": "第一城", "name_en": "City One", "sequence": 22},
            {"code": "SHM", "id": "99", "name_zh": "石門", "name_en": "Shek Mun", "sequence": 23},
            {"code": "TSH", "id": "100", "name_zh": "大水坑", "name_en": "Tai Shui Hang", "sequence": 24},
            {"code": "HEO", "id": "101", "name_zh": "恆安", "name_en": "Heng On", "sequence": 25},
            {"code": "MOS", "id": "102", "name_zh": "馬鞍山", "name_en": "Ma On Shan", "sequence": 26},
            {"code": "WKS", "id": "103", "name_zh": "烏溪沙", "name_en": "Wu Kai Sha", "sequence": 27},
        ],
        "start_termini": ["TUM"],
        "end_termini": ["WKS"],
    },
    {
        "line_code": "TWL",
        "direction": "UT",
        "url_direction": "up",
        "stations": [
            {"code": "CEN", "id": "1", "name_zh": "中環", "name_en": "Central", "sequence": 1},
            {"code": "ADM", "id": "2", "name_zh": "金鐘", "name_en": "Admiralty", "sequence": 2},
            {"code": "TST", "id": "3", "name_zh": "尖沙咀", "name_en": "Tsim Sha Tsui", "sequence": 3},
            {"code": "JOR", "id": "4", "name_zh": "佐敦", "name_en": "Jordan", "sequence": 4},
            {"code": "YMT", "id": "5", "name_zh": "油麻地", "name_en": "Yau Ma Tei", "sequence": 5},
            {"code": "MOK", "id": "6", "name_zh": "旺角", "name_en": "Mong Kok", "sequence": 6},
            {"code": "PRE", "id": "16", "name_zh": "太子", "name_en": "Prince Edward", "sequence": 7},
            {"code": "SSP", "id": "17", "name_zh": "深水埗", "name_en": "Sham Shui Po", "sequence": 8},
            {"code": "CSW", "id": "18", "name_zh": "長沙灣", "name_en": "Cheung Sha Wan", "sequence": 9},
            {"code": "LCK", "id": "19", "name_zh": "荔枝角", "name_en": "Lai Chi Kok", "sequence": 10},
            {"code": "MEF", "id": "20", "name_zh": "美孚", "name_en": "Mei Foo", "sequence": 11},
            {"code": "LAK", "id": "21", "name_zh": "荔景", "name_en": "Lai King", "sequence": 12},
            {"code": "KWF", "id": "22", "name_zh": "葵芳", "name_en": "Kwai Fong", "sequence": 13},
            {"code": "KWH", "id": "23", "name_zh": "葵興", "name_en": "Kwai Hing", "sequence": 14},
            {"code": "TWH", "id": "24", "name_zh": "大窩口", "name_en": "Tai Wo Hau", "sequence": 15},
            {"code": "TSW", "id": "25", "name_zh": "荃灣", "name_en": "Tsuen Wan", "sequence": 16},
        ],
        "start_termini": ["CEN"],
        "end_termini": ["TSW"],
    },
    {
        "line_code": "TWL",
        "direction": "DT",
        "url_direction": "down",
        "stations": [
            {"code": "TSW", "id": "25", "name_zh": "荃灣", "name_en": "Tsuen Wan", "sequence": 1},
            {"code": "TWH", "id": "24", "name_zh": "大窩口", "name_en": "Tai Wo Hau", "sequence": 2},
            {"code": "KWH", "id": "23", "name_zh": "葵興", "name_en": "Kwai Hing", "sequence": 3},
            {"code": "KWF", "id": "22", "name_zh": "葵芳", "name_en": "Kwai Fong", "sequence": 4},
            {"code": "LAK", "id": "21", "name_zh": "荔景", "name_en": "Lai King", "sequence": 5},
            {"code": "MEF", "id": "20", "name_zh": "美孚", "name_en": "Mei Foo", "sequence": 6},
            {"code": "LCK", "id": "19", "name_zh": "荔枝角", "name_en": "Lai Chi Kok", "sequence": 7},
            {"code": "CSW", "id": "18", "name_zh": "長沙灣", "name_en": "Cheung Sha Wan", "sequence": 8},
            {"code": "SSP", "id": "17", "name_zh": "深水埗", "name_en": "Sham Shui Po", "sequence": 9},
            {"code": "PRE", "id": "16", "name_zh": "太子", "name_en": "Prince Edward", "sequence": 10},
            {"code": "MOK", "id": "6", "name_zh": "旺角", "name_en": "Mong Kok", "sequence": 11},
            {"code": "YMT", "id": "5", "name_zh": "油麻地", "name_en": "Yau Ma Tei", "sequence": 12},
            {"code": "JOR", "id": "4", "name_zh": "佐敦", "name_en": "Jordan", "sequence": 13},
            {"code": "TST", "id": "3", "name_zh": "尖沙咀", "name_en": "Tsim Sha Tsui", "sequence": 14},
            {"code": "ADM", "id": "2", "name_zh": "金鐘", "name_en": "Admiralty", "sequence": 15},
            {"code": "CEN", "id": "1", "name_zh": "中環", "name_en": "Central", "sequence": 16},
        ],
        "start_termini": ["TSW"],
        "end_termini": ["CEN"],
    },
]

"""Static hazard-analysis tables (CODEX / FAO-WHO / NACMCF based).

Each entry is (name, risk, probability, control).
"""

from types import MappingProxyType

from ingredient_lens.schema import HazardCategory

C = HazardCategory

MICROBIAL_HAZARDS = MappingProxyType({
    C.PRODUCE: (
        ("병원성 대장균 O157:H7", "높음", "낮음", "세척·소독(염소수 50~200ppm) 후 흐르는 물 헹굼"),
        ("살모넬라균", "중간", "낮음", "재배용수 관리 및 수확 후 저온(5℃ 이하) 보관"),
        ("리스테리아 모노사이토제네스", "중간", "매우 낮음", "절단 농산물 냉장 유통 및 교차오염 방지"),
    ),
    C.LIVESTOCK: (
        ("살모넬라균", "높음", "중간", "중심온도 75℃ 1분 이상 가열 조리"),
        ("캠필로박터 제주니", "높음", "중간", "생육·조리육 도마 및 칼 구분 사용"),
        ("장출혈성 대장균", "높음", "낮음", "분쇄육 완전 가열 및 도축 위생 관리"),
        ("황색포도상구균", "중간", "중간", "작업자 개인위생 및 10℃ 이하 보관"),
    ),
    C.SEAFOOD: (
        ("장염비브리오균", "높음", "중간", "수돗물 세척 및 5℃ 이하 냉장 보관"),
        ("노로바이러스", "높음", "중간", "패류 중심온도 85℃ 1분 이상 가열"),
        ("아니사키스 (기생충)", "중간", "낮음", "-20℃ 24시간 이상 냉동 또는 충분한 가열"),
    ),
    C.GRAIN: (
        ("바실러스 세레우스", "중간", "중간", "조리 후 즉시 섭취 또는 신속 냉각 보관"),
        ("곰팡이 (아스퍼질러스 속)", "중간", "낮음", "수분 13% 이하 건조 및 밀봉 보관"),
        ("장출혈성 대장균 (생밀가루)", "중간", "매우 낮음", "밀가루 반죽 생식 금지 및 가열 조리"),
    ),
    C.FOOD_ADDITIVE: (
        ("미생물 오염 (제조 공정)", "낮음", "매우 낮음", "GMP 기준 제조 및 밀봉 보관"),
    ),
    C.SPICE: (
        ("살모넬라균", "중간", "낮음", "증기 살균 또는 방사선 조사 원료 사용"),
        ("바실러스 세레우스 (포자)", "중간", "중간", "건조 상태 유지 및 조리 시 충분한 가열"),
        ("클로스트리디움 퍼프린젠스", "낮음", "낮음", "향신료 첨가 식품 신속 냉각"),
    ),
    C.MEDICINAL_HERB: (
        ("곰팡이 (아플라톡신 생성균)", "중간", "중간", "건조·저습 보관 및 주기적 곰팡이 검사"),
        ("대장균군", "낮음", "낮음", "세척 후 충분한 건조 및 위생적 포장"),
    ),
})

CHEMICAL_HAZARDS = MappingProxyType({
    C.PRODUCE: (
        ("잔류농약 (PLS 기준 초과)", "높음", "중간", "농약 안전사용기준 준수 및 출하 전 잔류검사"),
        ("중금속 (납, 카드뮴)", "중간", "낮음", "재배 토양·용수 중금속 모니터링"),
        ("질산염", "낮음", "낮음", "엽채류 질소비료 과다 시비 제한"),
    ),
    C.LIVESTOCK: (
        ("잔류 동물용의약품 (항생제)", "높음", "낮음", "휴약기간 준수 및 도축 전 잔류검사"),
        ("성장호르몬", "중간", "매우 낮음", "수입 축산물 호르몬 검사 성적서 확인"),
        ("다이옥신 / PCB", "중간", "매우 낮음", "사료 원료 오염 관리"),
    ),
    C.SEAFOOD: (
        ("메틸수은", "높음", "중간", "대형 어종 섭취 빈도 제한 및 수은 검사"),
        ("패류독소 (마비성)", "높음", "낮음", "패류독소 발생 해역 채취 금지"),
        ("히스타민", "중간", "중간", "어획 직후 냉장 및 히스타민 검사"),
    ),
    C.GRAIN: (
        ("아플라톡신 B1", "높음", "낮음", "곡물 저장 습도 관리 및 수입 곡류 검사"),
        ("데옥시니발레놀 (DON)", "중간", "중간", "붉은곰팡이 감염 곡립 선별 제거"),
        ("잔류농약 (저장 훈증제)", "중간", "낮음", "훈증 후 충분한 환기 및 잔류검사"),
    ),
    C.FOOD_ADDITIVE: (
        ("일일섭취허용량(ADI) 초과", "중간", "낮음", "식품첨가물 사용기준 준수 및 표시 확인"),
        ("페닐알라닌 (페닐케톤뇨증 환자)", "높음", "낮음", "\"페닐알라닌 함유\" 표시 의무 이행"),
        ("불순물 (중금속)", "중간", "매우 낮음", "식품첨가물공전 순도시험 적합 확인"),
    ),
    C.SPICE: (
        ("아플라톡신", "높음", "중간", "수입 향신료 곰팡이독소 검사"),
        ("불법 색소 (수단 레드 등)", "높음", "낮음", "분말 향신료 불법 색소 검사"),
        ("잔류농약", "중간", "중간", "원산지별 잔류농약 모니터링"),
    ),
    C.MEDICINAL_HERB: (
        ("중금속 (납, 카드뮴, 비소)", "높음", "중간", "한약재 중금속 기준 검사"),
        ("이산화황 (표백 잔류)", "중간", "중간", "이산화황 잔류 기준(30ppm 이하) 확인"),
        ("벤조피렌", "중간", "낮음", "숙지황 등 가공 한약재 벤조피렌 검사"),
    ),
})

PHYSICAL_HAZARDS = MappingProxyType({
    C.PRODUCE: (
        ("흙, 돌 등 이물", "낮음", "중간", "세척 및 선별 공정 관리"),
        ("금속 파편 (수확 도구)", "중간", "매우 낮음", "금속 검출기 통과"),
    ),
    C.LIVESTOCK: (
        ("뼛조각", "중간", "중간", "발골 공정 X-ray 검사"),
        ("주사침 파편", "높음", "매우 낮음", "금속 검출기 통과 및 사양 관리 기록 확인"),
    ),
    C.SEAFOOD: (
        ("가시, 패각 조각", "중간", "중간", "손질 공정 육안 선별"),
        ("낚싯바늘 등 금속", "높음", "매우 낮음", "금속 검출기 통과"),
    ),
    C.GRAIN: (
        ("돌, 모래 등 이물", "낮음", "중간", "정선·석발 공정 관리"),
        ("해충 및 사체", "중간", "낮음", "저장고 방충 관리 및 체질"),
    ),
    C.FOOD_ADDITIVE: (
        ("포장재 파편", "낮음", "매우 낮음", "포장 공정 이물 검사"),
    ),
    C.SPICE: (
        ("돌, 줄기, 흙", "낮음", "중간", "체질 및 자력 선별"),
        ("금속 이물 (분쇄 공정)", "중간", "낮음", "분쇄 후 금속 검출기 통과"),
    ),
    C.MEDICINAL_HERB: (
        ("흙, 모래, 이종 식물", "낮음", "중간", "절단 전 세척 및 육안 선별"),
        ("금속 이물 (절단 공정)", "중간", "낮음", "절단 후 금속 검출기 통과"),
    ),
})

GENERIC_PLACEHOLDER = (
    ("일반 위해요소", "낮음", "낮음", "일반 위생관리 기준 준수"),
)

"""문법 읽기: 텍스트 → 검증된 Production 리스트"""

"""LR(1) 핵심: FIRST / closure / 오토마톤 / 병합 / 파싱 테이블"""

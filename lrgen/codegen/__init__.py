"""오토마톤 출력(DOT)"""

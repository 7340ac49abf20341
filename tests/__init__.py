"""테스트 패키지"""

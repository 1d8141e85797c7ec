"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- auth: 로그인/회원가입
- companies: 회사 관리
- ledgers: 계정(Chart of Accounts) 관리
- journals: 전표 입력/조회
- reports: 원장 명세서 (JSON/PDF)
"""

from realty_api.models.domain.loan_analysis import LoanAnalysis


def test_loan_analysis_indexes_match_migration():
    index_names = {index.name for index in LoanAnalysis.__table__.indexes}

    assert index_names == {"ix_loan_analyses_status", "ix_loan_analyses_created_at"}

from diagnocare.models.banner import Banner
from diagnocare.models.recommendation import Recommendation
from diagnocare.repositories.base import DocumentRepository


class BannerRepository(DocumentRepository):
    model = Banner


class RecommendationRepository(DocumentRepository):
    model = Recommendation

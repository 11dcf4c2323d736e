from .person_views import person_detail, activation_key_detail

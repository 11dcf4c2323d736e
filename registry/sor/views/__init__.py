from .sor_person_views import sor_person_list, sor_person_detail
from .role_views import role_list, role_detail

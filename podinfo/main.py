from typing import Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, Request

from .config import PodEnvironment
from .models import PodInfo
from .utils import HeaderValue, header_bag

router = APIRouter()


# === Helpers ===


def pod_info_out(env: PodEnvironment, headers: Dict[str, HeaderValue]) -> PodInfo:
    return PodInfo(
        MY_NODE_NAME=env.node_name,
        MY_POD_NAME=env.pod_name,
        MY_POD_NAMESPACE=env.pod_namespace,
        MY_POD_IP=env.pod_ip,
        MY_POD_SERVICE_ACCOUNT=env.pod_service_account,
        HEADERS=headers,
    )


def get_pod_environment(request: Request) -> PodEnvironment:
    return request.app.state.pod_environment


# === Pod info ===


@router.api_route("/getpodinfo", methods=["GET", "HEAD"], response_model=PodInfo)
def get_pod_info(request: Request, env: PodEnvironment = Depends(get_pod_environment)):
    return pod_info_out(env, header_bag(request.headers.raw))


def create_app(pod_environment: Optional[PodEnvironment] = None) -> FastAPI:
    """Build the application around a fixed snapshot of the pod environment.

    When no snapshot is given, ``os.environ`` is read once, here.
    """
    app = FastAPI(title="podinfo", version="1.0.0")
    if pod_environment is None:
        pod_environment = PodEnvironment.from_environ()
    app.state.pod_environment = pod_environment
    app.include_router(router)
    return app


app = create_app()

"""
Fixed demo cluster data served by the mock kubectl commands.

Nothing here talks to a real cluster: these are pre-formatted display strings
for the "batteries-included-aks" demo, laid out the way kubectl prints them.
"""

# Shown when the console opens.
SEED_TRANSCRIPT: tuple[str, ...] = (
    "$ kubectl get pods --all-namespaces",
    "NAMESPACE              NAME                                                        READY   STATUS    AGE",
    "battery-core           dashboard-fixed-6c94db6ddb-xqp9w                            1/1     Running   4h",
    "kubernetes-dashboard   kubernetes-dashboard-5c794bd9c8-n8z9k                       1/1     Running   4h",
    "istio-system          istiod-66ffbf9894-hk7j4                                     1/1     Running   4h",
    "",
    "$ kubectl get svc -n battery-core",
    "NAME              TYPE           CLUSTER-IP   EXTERNAL-IP   PORT(S)        AGE",
    "dashboard-fixed   LoadBalancer   10.2.0.163   4.157.150.5   80:30845/TCP   4h",
    "",
)

PODS_TABLE: tuple[str, ...] = (
    "NAME                                    READY   STATUS    RESTARTS   AGE",
    "control-server-dashboard-5d7fb6c9f4-x9kzl   1/1     Running   0          2h",
    "grafana-dashboard-7d8c6f7b5-mjwxp          1/1     Running   0          2h",
)

NODES_TABLE: tuple[str, ...] = (
    "NAME                                STATUS   ROLES   AGE   VERSION",
    "aks-nodepool1-12345678-vmss000000   Ready    agent   4h    v1.29.0",
    "aks-nodepool1-12345678-vmss000001   Ready    agent   4h    v1.29.0",
)

SERVICES_TABLE: tuple[str, ...] = (
    "NAME                TYPE           CLUSTER-IP    EXTERNAL-IP   PORT(S)        AGE",
    "dashboard-fixed     LoadBalancer   10.2.0.163    4.157.150.5   80:30845/TCP   4h",
    "grafana-dashboard   ClusterIP      10.2.0.87     <none>        3000/TCP       2h",
)

POD_LOGS: dict[str, tuple[str, ...]] = {
    "control-server-dashboard-5d7fb6c9f4-x9kzl": (
        "2024-01-15T10:00:01Z INFO  control-server starting on :8080",
        "2024-01-15T10:00:02Z INFO  connected to battery-core API",
        "2024-01-15T10:00:05Z INFO  dashboard ready, 3 namespaces watched",
    ),
    "grafana-dashboard-7d8c6f7b5-mjwxp": (
        'logger=settings t=2024-01-15T10:00:01Z level=info msg="Starting Grafana" version=10.2.3',
        'logger=http.server t=2024-01-15T10:00:03Z level=info msg="HTTP Server Listen" address=[::]:3000',
    ),
}
